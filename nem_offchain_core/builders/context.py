"""Collaborators injected into transaction builders."""

from dataclasses import dataclass, field

from nem_offchain_core.blockchain.network import SystemTimeProvider, TimeProvider
from nem_offchain_core.blockchain.sender import TransactionSender
from nem_offchain_core.fees.calculator import (
    DefaultTransactionFeeCalculator,
    TransactionFeeCalculator,
)


@dataclass
class BuilderContext:
    """Time source, default fee calculator and transmission collaborator."""

    time_provider: TimeProvider = field(default_factory=SystemTimeProvider)
    fee_calculator: TransactionFeeCalculator = field(
        default_factory=DefaultTransactionFeeCalculator
    )
    transaction_sender: TransactionSender | None = None


_default_context: BuilderContext | None = None


def get_default_context() -> BuilderContext:
    """Return the process-wide context used when none is injected."""
    global _default_context
    if _default_context is None:
        _default_context = BuilderContext()
    return _default_context


def set_default_context(context: BuilderContext | None) -> None:
    """Replace the process-wide context; ``None`` restores the defaults."""
    global _default_context
    _default_context = context
