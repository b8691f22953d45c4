"""CLI command for generating account keys."""

import logging
from pathlib import Path

import click
import yaml

from nem_offchain_core.blockchain.network import NetworkType
from nem_offchain_core.models.account import Account

from .config.formatting import print_address_info, print_hash_info, print_status

logger = logging.getLogger(__name__)


def generate_account_keys(network: NetworkType) -> dict:
    """Generate a new key pair.

    Args:
        network: Target network

    Returns:
        Dictionary with the private key, public key and address
    """
    account = Account.generate(network)
    return {
        "network": network.value,
        "private_key": account.private_key_hex,
        "public_key": account.public_key.hex(),
        "address": str(account.address),
    }


@click.group()
def keys() -> None:
    """Key management commands."""


@keys.command("generate")
@click.option(
    "--network",
    type=click.Choice([n.value for n in NetworkType], case_sensitive=False),
    default=NetworkType.TESTNET.value,
    help="Target network",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the wallet section to this YAML file",
)
def generate(network: str, output: Path | None) -> None:
    """Generate a new account key pair."""
    account_keys = generate_account_keys(NetworkType[network.upper()])

    print_address_info("Address", account_keys["address"])
    print_hash_info("Public Key", account_keys["public_key"])

    if output:
        with output.open("w") as f:
            yaml.dump(
                {"wallet": {"private_key": account_keys["private_key"]}},
                f,
                default_flow_style=False,
            )
        output.chmod(0o600)
        print_status("Keys", f"Private key written to {output}", success=True)
    else:
        print_hash_info("Private Key", account_keys["private_key"])
