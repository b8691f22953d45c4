"""Main CLI entry point for NEM off-chain tools."""

import click

from nem_offchain_core.cli.config.utils import setup_logging
from nem_offchain_core.cli.keys import keys
from nem_offchain_core.cli.multisig import multisig


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """NEM multisig transaction tools."""
    setup_logging(verbose)


cli.add_command(multisig)
cli.add_command(keys)


if __name__ == "__main__":
    cli()
