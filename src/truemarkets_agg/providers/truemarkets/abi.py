"""ABIs for the TrueMarkets contracts and the pools/tokens they use.

Only the view functions this package reads are listed.
"""
from truemarkets_agg.providers.core import ContractFunction

TRUTH_MARKET_MANAGER_ABI = [
    {
        "inputs": [],
        "name": "numberOfActiveMarkets",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"name": "index", "type": "uint256"}],
        "name": "getActiveMarketAddress",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

TRUTH_MARKET_ABI = [
    {
        "inputs": [],
        "name": "marketQuestion",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "additionalInfo",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "marketSource",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getCurrentStatus",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "endOfTrading",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getPoolAddresses",
        "outputs": [
            {"name": "yesPool", "type": "address"},
            {"name": "noPool", "type": "address"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]

UNISWAP_V3_POOL_ABI = [
    {
        "inputs": [],
        "name": "token0",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "token1",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "slot0",
        "outputs": [
            {"name": "sqrtPriceX96", "type": "uint160"},
            {"name": "tick", "type": "int24"},
            {"name": "observationIndex", "type": "uint16"},
            {"name": "observationCardinality", "type": "uint16"},
            {"name": "observationCardinalityNext", "type": "uint16"},
            {"name": "feeProtocol", "type": "uint8"},
            {"name": "unlocked", "type": "bool"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]

# ERC-20 ABI for balanceOf
ERC20_ABI = [
    {
        "inputs": [{"name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

NUMBER_OF_ACTIVE_MARKETS = ContractFunction.from_abi(TRUTH_MARKET_MANAGER_ABI, "numberOfActiveMarkets")
GET_ACTIVE_MARKET_ADDRESS = ContractFunction.from_abi(TRUTH_MARKET_MANAGER_ABI, "getActiveMarketAddress")

MARKET_QUESTION = ContractFunction.from_abi(TRUTH_MARKET_ABI, "marketQuestion")
ADDITIONAL_INFO = ContractFunction.from_abi(TRUTH_MARKET_ABI, "additionalInfo")
MARKET_SOURCE = ContractFunction.from_abi(TRUTH_MARKET_ABI, "marketSource")
GET_CURRENT_STATUS = ContractFunction.from_abi(TRUTH_MARKET_ABI, "getCurrentStatus")
END_OF_TRADING = ContractFunction.from_abi(TRUTH_MARKET_ABI, "endOfTrading")
GET_POOL_ADDRESSES = ContractFunction.from_abi(TRUTH_MARKET_ABI, "getPoolAddresses")

TOKEN0 = ContractFunction.from_abi(UNISWAP_V3_POOL_ABI, "token0")
TOKEN1 = ContractFunction.from_abi(UNISWAP_V3_POOL_ABI, "token1")
SLOT0 = ContractFunction.from_abi(UNISWAP_V3_POOL_ABI, "slot0")

BALANCE_OF = ContractFunction.from_abi(ERC20_ABI, "balanceOf")
