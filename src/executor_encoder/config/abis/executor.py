"""
Executor contract interface ABI.

The function names carry mined suffixes so that their selectors are cheap
(leading zero bytes); only the canonical signatures matter off-chain.
"""

PLACEHOLDER_COMPONENTS = [
    {"name": "to", "type": "address"},
    {"name": "data", "type": "bytes"},
    {"name": "offset", "type": "uint64"},
    {"name": "length", "type": "uint64"},
    {"name": "resOffset", "type": "uint64"},
]

EXECUTOR_ABI = [
    {
        "type": "function",
        "name": "exec_606BaXt",
        "stateMutability": "payable",
        "inputs": [{"name": "data", "type": "bytes[]"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "call_g0oyU7o",
        "stateMutability": "payable",
        "inputs": [
            {"name": "target", "type": "address"},
            {"name": "value", "type": "uint256"},
            {"name": "context", "type": "bytes32"},
            {"name": "callData", "type": "bytes"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "callWithPlaceholders4845164670",
        "stateMutability": "payable",
        "inputs": [
            {"name": "target", "type": "address"},
            {"name": "value", "type": "uint256"},
            {"name": "context", "type": "bytes32"},
            {"name": "callData", "type": "bytes"},
            {"name": "placeholders", "type": "tuple[]", "components": PLACEHOLDER_COMPONENTS},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "recipient", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [],
    },
]
