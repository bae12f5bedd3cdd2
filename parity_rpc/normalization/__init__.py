import os

from eth_utils import (
    import_string,
)

from .base import (  # noqa: F401
    BaseNormalizer,
)
from .default import (
    DefaultNormalizer,
)

NORMALIZER_ENVIRONMENT_VARIABLE = "PARITY_RPC_NORMALIZER"


def get_normalizer_class(normalizer_import_path=None):
    if normalizer_import_path is None:
        normalizer_import_path = os.environ.get(NORMALIZER_ENVIRONMENT_VARIABLE)

    if normalizer_import_path is None:
        return DefaultNormalizer
    return import_string(normalizer_import_path)


def get_normalizer(normalizer_import_path=None):
    normalizer_class = get_normalizer_class(normalizer_import_path)
    return normalizer_class()
