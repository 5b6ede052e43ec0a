"""Interactive-mode example: sign through a desktop wallet exposing JSON-RPC (e.g. Frame)."""

import asyncio
import os

from dotenv import load_dotenv

from bonkers_sdk import (
    BonkersSDK,
    Chain,
    Config,
    ConnectorConfig,
    InteractiveOptions,
    Mode,
    RPCWalletConnector,
)

load_dotenv()

SEPOLIA = Chain(
    id=11155111,
    name="Sepolia",
    rpc_urls=(os.getenv("SEPOLIA_RPC_URL", "https://ethereum-sepolia-rpc.publicnode.com"),),
    testnet=True,
)


def on_account(current, previous, unwatch):
    print(f"Account changed: {previous.address} -> {current.address}")


async def example_wallet_session():
    """Connect a wallet, read vault limits and grant a permit."""

    vault_address = os.getenv("VAULT_ADDRESS")
    controller = os.getenv("CONTROLLER_ADDRESS")
    if not (vault_address and controller):
        raise ValueError("VAULT_ADDRESS and CONTROLLER_ADDRESS are required")

    wallet = RPCWalletConnector(os.getenv("WALLET_RPC_URL", "http://127.0.0.1:1248"), name="Frame")
    sdk = BonkersSDK(
        Config(
            mode=Mode.INTERACTIVE,
            options=InteractiveOptions(
                connector_config=ConnectorConfig(chains=(SEPOLIA,), connectors=(wallet,))
            ),
        )
    )

    restored = await sdk.reconnect()
    if not restored:
        result = await sdk.connect(wallet)
        print(f"Connected accounts: {result.accounts} on chain {result.chain_id}")

    with sdk.watch_account(on_account):
        vault = sdk.vault(await sdk.get_params(SEPOLIA.id, vault_address, "VAULT"))
        limits = await vault.controller_limits(controller)
        print(f"Quota: {limits.quota} Allowance: {limits.reward_allowance}")

        outcome = await vault.grant_permit(controller)
        print(f"Permit granted in {outcome.tx_hash}")

    await sdk.disconnect()


async def main():
    """Run examples."""
    print("=" * 50)
    print("Bonkers SDK Interactive Examples")
    print("=" * 50)

    await example_wallet_session()


if __name__ == "__main__":
    asyncio.run(main())
