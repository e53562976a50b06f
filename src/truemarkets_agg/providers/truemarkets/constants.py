"""TrueMarkets deployment constants (Base mainnet)."""

SUPPORTED_NETWORK_ID = "base-mainnet"
SUPPORTED_PROTOCOL_FAMILY = "evm"

DEFAULT_RPC_URL = "https://mainnet.base.org"

# Registry of active TruthMarket contracts
TRUTH_MARKET_MANAGER_ADDRESS = "0x61A98Bef11867c69489B91f340fE545eEfc695d7"

# Reference asset every outcome token is priced against
USDC_ADDRESS = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
USDC_DECIMALS = 6

# YES and NO tokens share the same precision
OUTCOME_TOKEN_DECIMALS = 18
