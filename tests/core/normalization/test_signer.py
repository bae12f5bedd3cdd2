import decimal

import pytest

from parity_rpc.exceptions import (
    NormalizationError,
    OriginDecodingError,
)
from parity_rpc.normalization.outbound import (
    normalize_signer_origin,
    normalize_signer_request,
    normalize_signer_requests,
    normalize_signing_payload,
)

ADDRESS_A = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
ADDRESS_B = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"


def test_normalize_signer_request_id_and_origin():
    request = normalize_signer_request({"id": "0x1", "origin": {"dapp": "http://x"}})
    assert request == {
        "id": decimal.Decimal(1),
        "origin": {"type": "dapp", "details": "http://x"},
    }


def test_normalize_signer_request_send_transaction():
    request = normalize_signer_request(
        {
            "id": "0x2",
            "origin": {"signer": {"session": "0x" + "00" * 32}},
            "payload": {
                "sendTransaction": {
                    "condition": None,
                    "data": "0x",
                    "from": ADDRESS_A.lower(),
                    "gas": "0x5208",
                    "gasPrice": "0x1",
                    "nonce": None,
                    "to": ADDRESS_B.lower(),
                    "value": "0x0",
                }
            },
        }
    )
    assert request == {
        "id": 2,
        "origin": {"type": "signer", "details": {"session": "0x" + "00" * 32}},
        "payload": {
            "sendTransaction": {
                "condition": None,
                "data": "0x",
                "from": ADDRESS_A,
                "gas": 21000,
                "gasPrice": 1,
                "nonce": 0,
                "to": ADDRESS_B,
                "value": 0,
            }
        },
    }


def test_normalize_signer_request_sign_payloads():
    request = normalize_signer_request(
        {
            "id": 3,
            "payload": {
                "sign": {"address": ADDRESS_A.lower(), "data": "0x1234"},
                "decrypt": {"address": ADDRESS_B.lower(), "msg": "0xabcd"},
            },
        }
    )
    assert request["payload"] == {
        "sign": {"address": ADDRESS_A, "data": "0x1234"},
        "decrypt": {"address": ADDRESS_B, "msg": "0xabcd"},
    }


def test_normalize_signer_request_sign_transaction_condition():
    request = normalize_signer_request(
        {"id": 4, "payload": {"signTransaction": {"condition": {"block": "0x64"}}}}
    )
    assert request["payload"]["signTransaction"] == {"condition": {"block": 100}}


def test_normalize_signer_request_falsy():
    assert normalize_signer_request(None) is None


def test_normalize_signer_requests():
    requests = normalize_signer_requests([{"id": "0x1"}, {"id": "0x2"}])
    assert requests == [{"id": 1}, {"id": 2}]


def test_normalize_signing_payload():
    assert normalize_signing_payload({"address": ADDRESS_A.lower(), "data": "0x"}) == {
        "address": ADDRESS_A,
        "data": "0x",
    }
    assert normalize_signing_payload(None) is None


@pytest.mark.parametrize(
    "origin,expected",
    (
        ({"dapp": "http://x"}, {"type": "dapp", "details": "http://x"}),
        ({"rpc": "remote"}, {"type": "rpc", "details": "remote"}),
        ({"ipc": "0x" + "11" * 32}, {"type": "ipc", "details": "0x" + "11" * 32}),
        ("unknown", {"type": "unknown", "details": None}),
    ),
)
def test_normalize_signer_origin(origin, expected):
    assert normalize_signer_origin(origin) == expected


@pytest.mark.parametrize(
    "origin",
    (
        {},
        {"dapp": "http://x", "rpc": "remote"},
        None,
        42,
    ),
)
def test_normalize_signer_origin_rejects_malformed(origin):
    with pytest.raises(OriginDecodingError):
        normalize_signer_origin(origin)


def test_origin_decoding_error_is_a_normalization_error():
    with pytest.raises(NormalizationError):
        normalize_signer_request({"id": 1, "origin": {}})
