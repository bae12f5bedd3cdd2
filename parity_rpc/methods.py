"""
Which normalizer handles the result of each JSON-RPC method.

Values name a method on :class:`~parity_rpc.normalization.BaseNormalizer`
so that a custom normalizer class is honoured for every method.
"""

RESULT_NORMALIZERS = {
    # eth
    "eth_accounts": "normalize_address_list",
    "eth_blockNumber": "normalize_quantity",
    "eth_coinbase": "normalize_address",
    "eth_estimateGas": "normalize_quantity",
    "eth_gasPrice": "normalize_quantity",
    "eth_getBalance": "normalize_quantity",
    "eth_getBlockByHash": "normalize_block",
    "eth_getBlockByNumber": "normalize_block",
    "eth_getBlockTransactionCountByHash": "normalize_quantity",
    "eth_getBlockTransactionCountByNumber": "normalize_quantity",
    "eth_getFilterChanges": "normalize_log_entries",
    "eth_getFilterLogs": "normalize_log_entries",
    "eth_getLogs": "normalize_log_entries",
    "eth_getTransactionByBlockHashAndIndex": "normalize_transaction",
    "eth_getTransactionByBlockNumberAndIndex": "normalize_transaction",
    "eth_getTransactionByHash": "normalize_transaction",
    "eth_getTransactionCount": "normalize_quantity",
    "eth_getTransactionReceipt": "normalize_receipt",
    "eth_getUncleByBlockHashAndIndex": "normalize_block",
    "eth_getUncleByBlockNumberAndIndex": "normalize_block",
    "eth_getUncleCountByBlockHash": "normalize_quantity",
    "eth_getUncleCountByBlockNumber": "normalize_quantity",
    "eth_hashrate": "normalize_quantity",
    "eth_syncing": "normalize_sync_status",
    # net
    "net_peerCount": "normalize_quantity",
    # parity
    "parity_allAccountsInfo": "normalize_account_info_map",
    "parity_chainStatus": "normalize_chain_status",
    "parity_defaultAccount": "normalize_address",
    "parity_gasFloorTarget": "normalize_quantity",
    "parity_gasPriceHistogram": "normalize_histogram",
    "parity_getVaultMeta": "normalize_vault_meta",
    "parity_hardwareAccountsInfo": "normalize_hardware_account_info_map",
    "parity_listRecentDapps": "normalize_recent_dapp_usage",
    "parity_minGasPrice": "normalize_quantity",
    "parity_netPeers": "normalize_peer_set",
    "parity_nextNonce": "normalize_quantity",
    "parity_nodeKind": "passthrough_node_kind",
    "parity_pendingTransactions": "normalize_transaction_list",
    # personal
    "personal_listAccounts": "normalize_address_list",
    "personal_newAccount": "normalize_address",
    # signer
    "signer_requestsToConfirm": "normalize_signer_requests",
    # trace
    "trace_block": "normalize_trace_list",
    "trace_call": "normalize_trace_replay",
    "trace_filter": "normalize_trace_list",
    "trace_get": "normalize_trace",
    "trace_rawTransaction": "normalize_trace_replay",
    "trace_replayTransaction": "normalize_trace_replay",
    "trace_transaction": "normalize_trace_list",
}
