import datetime
import decimal
import json

from eth_utils import (
    get_logger,
    is_0x_prefixed,
    is_string,
    to_checksum_address,
    to_int,
)
from eth_utils.toolz import (
    curry,
)

logger = get_logger("parity_rpc.normalization.common")

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


#
# Primitive coercers
#
def coerce_address(value):
    # contract creations report `to`, `creates` and `contractAddress` as null
    if value is None:
        return None
    return to_checksum_address(value)


def coerce_quantity(value):
    if not value:
        return decimal.Decimal(0)
    elif isinstance(value, decimal.Decimal):
        return decimal.Decimal(value)
    elif isinstance(value, str) and is_0x_prefixed(value):
        return decimal.Decimal(to_int(hexstr=value))
    elif isinstance(value, float):
        return decimal.Decimal(str(value))
    else:
        return decimal.Decimal(value)


def _parse_isoformat_roundtrip(value):
    try:
        parsed = datetime.datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None

    if parsed.isoformat() != value:
        return None
    # naive strings are taken as UTC
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def coerce_timestamp(value):
    """
    Values which already serialize as dates are returned as-is.  Strings
    which survive an isoformat round trip are parsed, anything else is
    treated as a count of seconds since the unix epoch.
    """
    if callable(getattr(value, "isoformat", None)):
        return value

    if isinstance(value, str):
        parsed = _parse_isoformat_roundtrip(value)
        if parsed is not None:
            return parsed

    milliseconds = int(coerce_quantity(value) * 1000)
    return EPOCH + datetime.timedelta(milliseconds=milliseconds)


def decode_embedded_metadata(value):
    if is_string(value):
        try:
            return json.loads(value)
        except ValueError:
            logger.debug("Discarding undecodable metadata: %r", value)
            return {}

    return value or {}


#
# Table helpers
#
@curry
def normalize_if(value, conditional_fn, normalizer):
    if conditional_fn(value):
        return normalizer(value)
    else:
        return value


@curry
def normalize_dict(value, normalizers):
    return {
        key: normalizers[key](item) if key in normalizers else item
        for key, item in value.items()
    }


@curry
def normalize_array(value, normalizer):
    return [normalizer(item) for item in value]


@curry
def normalize_keys(value, normalizer):
    return {normalizer(key): item for key, item in value.items()}


@curry
def normalize_values(value, normalizer):
    return {key: normalizer(item) for key, item in value.items()}
