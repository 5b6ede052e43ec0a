"""Server-mode example: verify a Controller and reward a user from one of its vaults."""

import asyncio
import logging
import os

from dotenv import load_dotenv

from bonkers_sdk import (
    BonkersSDK,
    BonkersError,
    Chain,
    Config,
    Mode,
    ServerOptions,
)

load_dotenv()

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

SEPOLIA = Chain(
    id=11155111,
    name="Sepolia",
    rpc_urls=(os.getenv("SEPOLIA_RPC_URL", "https://ethereum-sepolia-rpc.publicnode.com"),),
    testnet=True,
)


async def example_controller_reward():
    """Resolve a deployed Controller and pay a reward through it."""

    private_key = os.getenv("PRIVATE_KEY")
    if not private_key:
        raise ValueError("PRIVATE_KEY not found in environment variables")

    controller_address = os.getenv("CONTROLLER_ADDRESS")
    vault_address = os.getenv("VAULT_ADDRESS")
    receiver = os.getenv("RECEIVER_ADDRESS")
    if not (controller_address and vault_address and receiver):
        raise ValueError("CONTROLLER_ADDRESS, VAULT_ADDRESS and RECEIVER_ADDRESS are required")

    sdk = BonkersSDK(
        Config(mode=Mode.SERVER, options=ServerOptions(chains=(SEPOLIA,), private_key=private_key))
    )
    print(f"Signing as {sdk.account()} on {sdk.chain().name}")

    params = await sdk.get_params(SEPOLIA.id, controller_address, "CONTROLLER")
    controller = sdk.controller(params)
    print(f"Controller owner: {await controller.owner()}")
    print(f"Controller version: {await controller.version()}")

    try:
        outcome = await controller.vault_reward(vault_address, receiver, 10**18)
    except BonkersError as e:
        print(f"Reward failed: {e.name} {e.message}")
        return

    print(f"Reward sent in {outcome.tx_hash}")


async def main():
    """Run examples."""
    print("=" * 50)
    print("Bonkers SDK Server Examples")
    print("=" * 50)

    await example_controller_reward()


if __name__ == "__main__":
    asyncio.run(main())
