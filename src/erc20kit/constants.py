"""Constants for erc20kit.

ABI framing sizes, EIP-1559 fee policy and provider defaults shared by
the builder, the signer and the ERC-20 encoder.
"""

# ABI Encoding Constants
ABI_SELECTOR_LENGTH = 4
ABI_WORD_LENGTH = 32
ADDRESS_LENGTH = 20
REVERT_SELECTOR = "0x08c379a0"

# Ethereum Constants
MAX_UINT256 = 2**256 - 1
DYNAMIC_FEE_TX_TYPE = 2

# Fee Policy (EIP-1559)
# maxFeePerGas = baseFee * 150 // 100 + tip
BASE_FEE_MULTIPLIER_NUMERATOR = 150
BASE_FEE_MULTIPLIER_DENOMINATOR = 100
MIN_PRIORITY_FEE = 1  # wei

# Network Constants
PROVIDER_TIMEOUT_SECONDS = 30
RPC_URL_ENV_VAR = "ETH_RPC_URL"

# ERC-20 function signatures (canonical, no spaces)
BALANCE_OF_SIGNATURE = "balanceOf(address)"
TRANSFER_SIGNATURE = "transfer(address,uint256)"
APPROVE_SIGNATURE = "approve(address,uint256)"
ALLOWANCE_SIGNATURE = "allowance(address,address)"
TRANSFER_FROM_SIGNATURE = "transferFrom(address,address,uint256)"

__all__ = [
    "ABI_SELECTOR_LENGTH",
    "ABI_WORD_LENGTH",
    "ADDRESS_LENGTH",
    "REVERT_SELECTOR",
    "MAX_UINT256",
    "DYNAMIC_FEE_TX_TYPE",
    "BASE_FEE_MULTIPLIER_NUMERATOR",
    "BASE_FEE_MULTIPLIER_DENOMINATOR",
    "MIN_PRIORITY_FEE",
    "PROVIDER_TIMEOUT_SECONDS",
    "RPC_URL_ENV_VAR",
    # ERC-20
    "BALANCE_OF_SIGNATURE",
    "TRANSFER_SIGNATURE",
    "APPROVE_SIGNATURE",
    "ALLOWANCE_SIGNATURE",
    "TRANSFER_FROM_SIGNATURE",
]
