from abc import (
    ABCMeta,
    abstractmethod,
)


class BaseNormalizer(metaclass=ABCMeta):
    #
    # Primitives
    #
    @abstractmethod
    def normalize_address(self, address):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_quantity(self, quantity):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_timestamp(self, timestamp):
        raise NotImplementedError("Must be implemented by subclasses")

    #
    # Chain data
    #
    @abstractmethod
    def normalize_block(self, block):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_receipt(self, receipt):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_log_entry(self, log_entry):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_log_entries(self, log_entries):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_transaction(self, transaction):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_transaction_list(self, transactions):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_transaction_condition(self, condition):
        raise NotImplementedError("Must be implemented by subclasses")

    #
    # Node status
    #
    @abstractmethod
    def normalize_chain_status(self, status):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_sync_status(self, status):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_histogram(self, histogram):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_peer(self, peer):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_peer_set(self, peers):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def passthrough_node_kind(self, info):
        raise NotImplementedError("Must be implemented by subclasses")

    #
    # Traces
    #
    @abstractmethod
    def normalize_trace(self, trace):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_trace_list(self, traces):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_trace_replay(self, replay):
        raise NotImplementedError("Must be implemented by subclasses")

    #
    # Signer
    #
    @abstractmethod
    def normalize_signing_payload(self, payload):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_signer_request(self, request):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_signer_requests(self, requests):
        raise NotImplementedError("Must be implemented by subclasses")

    #
    # Accounts
    #
    @abstractmethod
    def normalize_address_list(self, addresses):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_account_info_map(self, infos):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_hardware_account_info_map(self, infos):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_recent_dapp_usage(self, usage):
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def normalize_vault_meta(self, meta):
        raise NotImplementedError("Must be implemented by subclasses")
