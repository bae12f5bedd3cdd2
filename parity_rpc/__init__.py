from importlib.metadata import (
    version as __version,
)

from .exceptions import (
    NormalizationError,
    OriginDecodingError,
)
from .main import (
    ResultNormalizer,
)
from .normalization import (
    BaseNormalizer,
    DefaultNormalizer,
)

__version__ = __version("parity-rpc")
