"""CLI commands for building and announcing multisig transactions."""

import json
import logging
from pathlib import Path

import click

from nem_offchain_core.builders.context import BuilderContext
from nem_offchain_core.builders.multisig_builder import (
    DEFAULT_DEADLINE_HOURS,
    MultisigTransactionBuilder,
)
from nem_offchain_core.models.account import Account, Address
from nem_offchain_core.models.transactions import (
    Amount,
    MultisigTransaction,
    TransferTransaction,
)

from .base import build_context
from .config.formatting import format_multisig_summary, print_hash_info, print_status
from .config.keys import KeyManager
from .config.network import NetworkConfig

logger = logging.getLogger(__name__)


def create_inner_transfer(
    context: BuilderContext,
    multisig_account: Account,
    recipient: Address,
    amount: Amount,
    message: str | None = None,
) -> TransferTransaction:
    """Create the transfer issued by the multisig account."""
    timestamp = context.time_provider.current_time()
    transfer = TransferTransaction(
        timestamp, multisig_account, recipient, amount, message
    )
    transfer.fee = context.fee_calculator.calculate_minimum_fee(transfer)
    transfer.deadline = timestamp.add_hours(DEFAULT_DEADLINE_HOURS)
    return transfer


def write_transaction_file(transaction: MultisigTransaction, output: Path) -> None:
    """Store a built multisig transaction as JSON."""
    with output.open("w") as f:
        json.dump(
            {
                "transaction": transaction.to_bytes().hex(),
                "signature": transaction.signature.hex(),
                "hash": transaction.hash().hex(),
                "inner_hash": transaction.other_transaction_hash.hex(),
                "details": transaction.to_dict(),
            },
            f,
            indent=2,
        )


@click.group()
def multisig() -> None:
    """Multisig transaction commands."""


@multisig.command("transfer")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to configuration YAML",
)
@click.option("--recipient", required=True, help="Recipient address")
@click.option("--amount", type=click.IntRange(min=0), required=True, help="Amount in micro-XEM")
@click.option("--message", default=None, help="Optional plain text message")
@click.option(
    "--fee",
    type=click.IntRange(min=0),
    default=None,
    help="Explicit envelope fee in micro-XEM; the envelope is then built with a zero fee",
)
@click.option(
    "--deadline-hours",
    type=click.IntRange(1, 24),
    default=None,
    help=f"Hours until the envelope expires (default {DEFAULT_DEADLINE_HOURS})",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the built transaction to this JSON file",
)
@click.option("--send", is_flag=True, help="Announce the transaction to the node")
def transfer(
    config: Path,
    recipient: str,
    amount: int,
    message: str | None,
    fee: int | None,
    deadline_hours: int | None,
    output: Path | None,
    send: bool,
) -> None:
    """Wrap a transfer from the multisig account in a signed multisig envelope."""
    try:
        network_config = NetworkConfig.from_yaml(config)
        network_config.validate()
        if network_config.multisig is None:
            raise click.ClickException("Configuration is missing the multisig section")

        context = build_context(network_config)
        cosigner = KeyManager.load_from_config(
            network_config.wallet, network_config.network
        )
        multisig_account = Account.from_public_key(
            network_config.multisig.account_public_key, network_config.network
        )

        inner = create_inner_transfer(
            context,
            multisig_account,
            Address.from_encoded(recipient),
            Amount(amount),
            message,
        )

        configurator = (
            MultisigTransactionBuilder(context)
            .start_with_sender(cosigner)
            .with_inner_transaction(inner)
        )
        if fee is not None:
            configurator.with_fee(Amount(fee))
        if deadline_hours is not None:
            configurator.with_deadline(
                context.time_provider.current_time().add_hours(deadline_hours)
            )

        transaction = configurator.build_and_send() if send else configurator.build()

        format_multisig_summary(transaction)
        if output:
            write_transaction_file(transaction, output)
            print_hash_info("Saved to", str(output))

        if send:
            print_status("Transaction", "Announced successfully", success=True)
        else:
            print_status("Transaction", "Built successfully", success=True)

    except click.ClickException:
        raise
    except Exception as e:
        logger.error("Failed to build multisig transaction", exc_info=e)
        raise click.ClickException(str(e)) from e
