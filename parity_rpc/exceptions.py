class NormalizationError(Exception):
    """
    Base class for errors raised while normalizing an RPC result.
    """


class OriginDecodingError(NormalizationError, ValueError):
    """
    Raised when a signer request origin is not a single-variant mapping.
    """
