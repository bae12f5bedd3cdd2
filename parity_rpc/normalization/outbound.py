from collections.abc import (
    Mapping,
)

from eth_utils.toolz import (
    identity,
)

from parity_rpc.exceptions import (
    OriginDecodingError,
)

from .common import (
    coerce_address,
    coerce_quantity,
    coerce_timestamp,
    decode_embedded_metadata,
    normalize_array,
    normalize_dict,
    normalize_if,
    normalize_keys,
    normalize_values,
)

NOT_SYNCING = "false"

normalize_quantity_array = normalize_array(normalizer=coerce_quantity)
normalize_block_gap = normalize_if(
    conditional_fn=bool,
    normalizer=normalize_quantity_array,
)


def _normalize_truthy(normalizers):
    return normalize_if(
        conditional_fn=bool,
        normalizer=normalize_dict(normalizers=normalizers),
    )


BLOCK_NORMALIZERS = {
    "author": coerce_address,
    "miner": coerce_address,
    "difficulty": coerce_quantity,
    "gasLimit": coerce_quantity,
    "gasUsed": coerce_quantity,
    "nonce": coerce_quantity,
    "number": coerce_quantity,
    "totalDifficulty": coerce_quantity,
    "timestamp": coerce_timestamp,
}
normalize_block = _normalize_truthy(BLOCK_NORMALIZERS)


RECEIPT_NORMALIZERS = {
    "contractAddress": coerce_address,
    "blockNumber": coerce_quantity,
    "cumulativeGasUsed": coerce_quantity,
    "gasUsed": coerce_quantity,
    "transactionIndex": coerce_quantity,
}
normalize_receipt = _normalize_truthy(RECEIPT_NORMALIZERS)


LOG_ENTRY_NORMALIZERS = {
    "address": coerce_address,
    "blockNumber": coerce_quantity,
    "logIndex": coerce_quantity,
    "transactionIndex": coerce_quantity,
}
normalize_log_entry = normalize_dict(normalizers=LOG_ENTRY_NORMALIZERS)


def normalize_transaction_condition(condition):
    if not condition:
        return condition

    if condition.get("block"):
        return dict(condition, block=coerce_quantity(condition["block"]))
    elif condition.get("time"):
        return dict(condition, time=coerce_timestamp(condition["time"]))
    else:
        return condition


TRANSACTION_NORMALIZERS = {
    "creates": coerce_address,
    "from": coerce_address,
    "to": coerce_address,
    "blockNumber": coerce_quantity,
    "gas": coerce_quantity,
    "gasPrice": coerce_quantity,
    "nonce": coerce_quantity,
    "transactionIndex": coerce_quantity,
    "value": coerce_quantity,
    "condition": normalize_transaction_condition,
}
normalize_transaction = _normalize_truthy(TRANSACTION_NORMALIZERS)


CHAIN_STATUS_NORMALIZERS = {
    "blockGap": normalize_block_gap,
}
normalize_chain_status = _normalize_truthy(CHAIN_STATUS_NORMALIZERS)


HISTOGRAM_NORMALIZERS = {
    "bucketBounds": normalize_quantity_array,
    "counts": normalize_quantity_array,
}
normalize_histogram = _normalize_truthy(HISTOGRAM_NORMALIZERS)


SYNC_STATUS_NORMALIZERS = {
    "currentBlock": coerce_quantity,
    "highestBlock": coerce_quantity,
    "startingBlock": coerce_quantity,
    "warpChunksAmount": coerce_quantity,
    "warpChunksProcessed": coerce_quantity,
    "blockGap": normalize_block_gap,
}


def normalize_sync_status(status):
    # `eth_syncing` answers with a bare `false` when the node is up to date
    if not status or status == NOT_SYNCING:
        return status
    return normalize_dict(status, SYNC_STATUS_NORMALIZERS)


#
# Peers
#
def normalize_peer(peer):
    protocols = {
        name: dict(protocol, difficulty=coerce_quantity(protocol.get("difficulty")))
        for name, protocol in peer["protocols"].items()
        if protocol
    }
    return dict(peer, protocols=protocols)


def normalize_peer_set(peers):
    return {
        "active": coerce_quantity(peers.get("active")),
        "connected": coerce_quantity(peers.get("connected")),
        "max": coerce_quantity(peers.get("max")),
        "peers": [normalize_peer(peer) for peer in peers["peers"]],
    }


#
# Traces
#
TRACE_ACTION_NORMALIZERS = {
    "gas": coerce_quantity,
    "value": coerce_quantity,
    "balance": coerce_quantity,
    "from": coerce_address,
    "to": coerce_address,
    "address": coerce_address,
    "refundAddress": coerce_address,
}

# A contract creation reports the new address on the result, so it is
# checksummed where it sits.
TRACE_RESULT_NORMALIZERS = {
    "gasUsed": coerce_quantity,
    "address": coerce_address,
}

TRACE_NORMALIZERS = {
    "action": _normalize_truthy(TRACE_ACTION_NORMALIZERS),
    "result": _normalize_truthy(TRACE_RESULT_NORMALIZERS),
    "traceAddress": normalize_if(
        conditional_fn=bool,
        normalizer=normalize_quantity_array,
    ),
    "subtraces": coerce_quantity,
    "transactionPosition": coerce_quantity,
    "blockNumber": coerce_quantity,
}
normalize_trace = _normalize_truthy(TRACE_NORMALIZERS)

normalize_trace_list = normalize_if(
    conditional_fn=bool,
    normalizer=normalize_array(normalizer=normalize_trace),
)

TRACE_REPLAY_NORMALIZERS = {
    "trace": normalize_trace_list,
}
normalize_trace_replay = _normalize_truthy(TRACE_REPLAY_NORMALIZERS)


#
# Signer
#
SIGNING_PAYLOAD_NORMALIZERS = {
    "address": coerce_address,
}
normalize_signing_payload = _normalize_truthy(SIGNING_PAYLOAD_NORMALIZERS)


def normalize_signer_origin(origin):
    """
    The node encodes the origin of a request as a mapping holding exactly one
    variant, e.g. ``{"dapp": "http://localhost:3000"}``.  Variants without a
    payload are sent as a bare string such as ``"unknown"``.
    """
    if isinstance(origin, str):
        return {"type": origin, "details": None}

    if not isinstance(origin, Mapping):
        raise OriginDecodingError(
            f"Signer request origin must be a mapping or a string, got: {origin!r}"
        )
    elif len(origin) != 1:
        raise OriginDecodingError(
            "Signer request origin must hold exactly one variant, got keys: "
            f"{sorted(origin)!r}"
        )

    ((origin_type, details),) = origin.items()
    return {"type": origin_type, "details": details}


SIGNER_PAYLOAD_NORMALIZERS = {
    "decrypt": normalize_signing_payload,
    "sign": normalize_signing_payload,
    "signTransaction": normalize_transaction,
    "sendTransaction": normalize_transaction,
}

SIGNER_REQUEST_NORMALIZERS = {
    "id": coerce_quantity,
    "payload": _normalize_truthy(SIGNER_PAYLOAD_NORMALIZERS),
    "origin": normalize_signer_origin,
}
normalize_signer_request = _normalize_truthy(SIGNER_REQUEST_NORMALIZERS)


#
# Accounts
#
def normalize_address_list(addresses):
    return [coerce_address(address) for address in addresses or []]


def _normalize_account_info(info):
    normalized = {"name": info.get("name")}
    if info.get("meta"):
        normalized["uuid"] = info.get("uuid")
        normalized["meta"] = decode_embedded_metadata(info["meta"])
    return normalized


def normalize_account_info_map(infos):
    return {
        coerce_address(address): _normalize_account_info(info)
        for address, info in infos.items()
    }


normalize_hardware_account_info_map = normalize_keys(normalizer=coerce_address)

normalize_recent_dapp_usage = normalize_if(
    conditional_fn=bool,
    normalizer=normalize_values(normalizer=coerce_timestamp),
)

normalize_vault_meta = decode_embedded_metadata

passthrough_node_kind = identity


#
# Result lists
#
normalize_log_entries = normalize_if(
    conditional_fn=bool,
    normalizer=normalize_array(normalizer=normalize_log_entry),
)
normalize_transaction_list = normalize_if(
    conditional_fn=bool,
    normalizer=normalize_array(normalizer=normalize_transaction),
)
normalize_signer_requests = normalize_if(
    conditional_fn=bool,
    normalizer=normalize_array(normalizer=normalize_signer_request),
)
