#!/usr/bin/env python3
"""
ERC-20 walkthrough on Holesky

Reads balance and allowance, then builds, signs and broadcasts a
transfer (and optionally approve / transferFrom) against a live node.

Usage:
    python examples/erc20_transfer.py balance
    python examples/erc20_transfer.py transfer --amount 100
    python examples/erc20_transfer.py approve --unlimited
    python examples/erc20_transfer.py transfer-from --amount 100

Environment Variables:
    PRIVATE_KEY: Key of the account sending transactions
    ETH_RPC_URL: Holesky RPC URL (default: https://ethereum-holesky-rpc.publicnode.com)
    TOKEN_ADDRESS: ERC-20 contract (default: Holesky USDC test token)
    RECIPIENT_ADDRESS: Receiver of transfers
    SPENDER_ADDRESS: Spender for approve
    OWNER_ADDRESS: Token owner for transferFrom
    TOKEN_DECIMALS: Token decimals (default: 18)
"""

import argparse
import os
import sys

from dotenv import load_dotenv
from eth_account import Account

from erc20kit import (
    MAX_UINT256,
    EthereumConnector,
    Erc20KitError,
    Network,
    configure_logging,
    from_base_units,
    to_base_units,
)

# Load .env file
load_dotenv()

PRIVATE_KEY = os.getenv("PRIVATE_KEY", "")
TOKEN_DECIMALS = int(os.getenv("TOKEN_DECIMALS", "18"))
RECIPIENT_ADDRESS = os.getenv("RECIPIENT_ADDRESS", "0x646d15ccc9157ee02a51747a6fd5d8b914f655f0")
SPENDER_ADDRESS = os.getenv("SPENDER_ADDRESS", "0x38c108cebf53edd0b025d6390ff7eb473d98babe")
OWNER_ADDRESS = os.getenv("OWNER_ADDRESS", RECIPIENT_ADDRESS)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("action", choices=["balance", "transfer", "approve", "transfer-from"])
    parser.add_argument("--amount", default="100", help="Amount in whole tokens (default: 100)")
    parser.add_argument("--unlimited", action="store_true", help="Approve 2**256 - 1")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    configure_logging("DEBUG" if args.verbose else "INFO")

    connector = EthereumConnector.from_network(Network.HOLESKY)
    token = os.getenv("TOKEN_ADDRESS", connector.config.usdc)

    if args.action == "balance":
        account = Account.from_key(PRIVATE_KEY).address if PRIVATE_KEY else RECIPIENT_ADDRESS
        balance = connector.erc20.balance_of(token, account)
        allowance = connector.erc20.allowance(token, account, SPENDER_ADDRESS)
        print(f"Token:     {token}")
        print(f"Account:   {account}")
        print(f"Balance:   {from_base_units(balance, TOKEN_DECIMALS)} ({balance} raw)")
        print(f"Allowance: {from_base_units(allowance, TOKEN_DECIMALS)} for {SPENDER_ADDRESS}")
        return 0

    if not PRIVATE_KEY:
        print("ERROR: PRIVATE_KEY not set")
        return 1

    sender = Account.from_key(PRIVATE_KEY).address
    amount = to_base_units(args.amount, TOKEN_DECIMALS)

    if args.action == "transfer":
        tx = connector.erc20.transfer(token, sender, RECIPIENT_ADDRESS, amount)
    elif args.action == "approve":
        tx = connector.erc20.approve(token, sender, SPENDER_ADDRESS, MAX_UINT256 if args.unlimited else amount)
    else:
        tx = connector.erc20.transfer_from(token, sender, OWNER_ADDRESS, RECIPIENT_ADDRESS, amount)

    print(f"Nonce:        {tx.nonce}")
    print(f"Gas limit:    {tx.gas_limit}")
    print(f"Max fee:      {tx.max_fee_per_gas} wei")
    print(f"Priority fee: {tx.max_priority_fee_per_gas} wei")

    tx_hash = connector.sign_and_send(tx, PRIVATE_KEY)
    print(f"Transaction sent: {tx_hash}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Erc20KitError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
