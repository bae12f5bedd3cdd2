from eth_utils import (
    get_logger,
)

from parity_rpc.methods import (
    RESULT_NORMALIZERS,
)
from parity_rpc.normalization import (
    get_normalizer,
)


class ResultNormalizer:
    """
    Entry point for transports: turns the decoded ``result`` of a JSON-RPC
    response into canonical values for the method that produced it.
    """

    logger = get_logger("parity_rpc.main")

    def __init__(self, normalizer=None, result_normalizers=None):
        if normalizer is None:
            normalizer = get_normalizer()
        if result_normalizers is None:
            result_normalizers = RESULT_NORMALIZERS

        self.normalizer = normalizer
        self.result_normalizers = result_normalizers

    def get_result_normalizer(self, method):
        try:
            normalizer_name = self.result_normalizers[method]
        except KeyError:
            return None
        return getattr(self.normalizer, normalizer_name)

    def normalize_result(self, method, result):
        normalize_fn = self.get_result_normalizer(method)
        if normalize_fn is None:
            self.logger.debug("No result normalizer for %s, passing through", method)
            return result
        return normalize_fn(result)
