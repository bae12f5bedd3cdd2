from .base import (
    BaseNormalizer,
)
from .common import (
    coerce_address,
    coerce_quantity,
    coerce_timestamp,
)
from .outbound import (
    normalize_account_info_map,
    normalize_address_list,
    normalize_block,
    normalize_chain_status,
    normalize_hardware_account_info_map,
    normalize_histogram,
    normalize_log_entries,
    normalize_log_entry,
    normalize_peer,
    normalize_peer_set,
    normalize_receipt,
    normalize_recent_dapp_usage,
    normalize_signer_request,
    normalize_signer_requests,
    normalize_signing_payload,
    normalize_sync_status,
    normalize_trace,
    normalize_trace_list,
    normalize_trace_replay,
    normalize_transaction,
    normalize_transaction_condition,
    normalize_transaction_list,
    normalize_vault_meta,
    passthrough_node_kind,
)


class DefaultNormalizer(BaseNormalizer):
    #
    # Primitives
    #
    normalize_address = staticmethod(coerce_address)
    normalize_quantity = staticmethod(coerce_quantity)
    normalize_timestamp = staticmethod(coerce_timestamp)

    #
    # Chain data
    #
    normalize_block = staticmethod(normalize_block)
    normalize_receipt = staticmethod(normalize_receipt)
    normalize_log_entry = staticmethod(normalize_log_entry)
    normalize_log_entries = staticmethod(normalize_log_entries)
    normalize_transaction = staticmethod(normalize_transaction)
    normalize_transaction_list = staticmethod(normalize_transaction_list)
    normalize_transaction_condition = staticmethod(normalize_transaction_condition)

    #
    # Node status
    #
    normalize_chain_status = staticmethod(normalize_chain_status)
    normalize_sync_status = staticmethod(normalize_sync_status)
    normalize_histogram = staticmethod(normalize_histogram)
    normalize_peer = staticmethod(normalize_peer)
    normalize_peer_set = staticmethod(normalize_peer_set)
    passthrough_node_kind = staticmethod(passthrough_node_kind)

    #
    # Traces
    #
    normalize_trace = staticmethod(normalize_trace)
    normalize_trace_list = staticmethod(normalize_trace_list)
    normalize_trace_replay = staticmethod(normalize_trace_replay)

    #
    # Signer
    #
    normalize_signing_payload = staticmethod(normalize_signing_payload)
    normalize_signer_request = staticmethod(normalize_signer_request)
    normalize_signer_requests = staticmethod(normalize_signer_requests)

    #
    # Accounts
    #
    normalize_address_list = staticmethod(normalize_address_list)
    normalize_account_info_map = staticmethod(normalize_account_info_map)
    normalize_hardware_account_info_map = staticmethod(
        normalize_hardware_account_info_map
    )
    normalize_recent_dapp_usage = staticmethod(normalize_recent_dapp_usage)
    normalize_vault_meta = staticmethod(normalize_vault_meta)
