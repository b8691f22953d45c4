"""CLI output helpers for built transactions."""

import click

from nem_offchain_core.constants.colors import CliColor
from nem_offchain_core.models.transactions import MultisigTransaction


def print_header(text: str) -> None:
    """Print styled header text."""
    click.echo()
    click.secho(f"=== {text} ===", fg=CliColor.HEADER, bold=True)
    click.echo()


def print_address_info(label: str, address: str) -> None:
    """Print formatted address information."""
    click.echo(
        f"{click.style(label, fg=CliColor.INFO)}: "
        f"{click.style(address, fg=CliColor.ADDRESS)}"
    )


def print_hash_info(label: str, hash_value: str) -> None:
    """Print formatted hash information."""
    click.echo(
        f"{click.style(label, fg=CliColor.INFO)}: "
        f"{click.style(hash_value, fg=CliColor.HASH)}"
    )


def print_status(status: str, message: str, success: bool = True) -> None:
    """Print status message with appropriate styling."""
    icon = "✓" if success else "✗"
    color = CliColor.SUCCESS if success else CliColor.ERROR
    click.secho(f"{icon} {status}: {message}", fg=color)


def format_multisig_summary(transaction: MultisigTransaction) -> None:
    """Print a summary of a built multisig transaction."""
    print_header("Multisig Transaction")
    print_address_info("Cosigner", str(transaction.signer.address))
    print_address_info(
        "Multisig Account", str(transaction.other_transaction.signer.address)
    )
    print_hash_info("Inner Transaction Hash", transaction.other_transaction_hash.hex())
    print_hash_info("Transaction Hash", transaction.hash().hex())
    click.echo(
        f"{click.style('Fee', fg=CliColor.INFO)}: "
        f"{click.style(str(transaction.fee), fg=CliColor.VALUE)}"
    )
    click.echo(
        f"{click.style('Deadline', fg=CliColor.INFO)}: "
        f"{click.style(transaction.deadline.to_datetime().isoformat(), fg=CliColor.VALUE)}"
    )
