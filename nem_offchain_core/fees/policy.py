"""Fee policies applied by transaction builders."""

import logging
from dataclasses import dataclass

from nem_offchain_core.models.transactions import Amount, Transaction

from .calculator import TransactionFeeCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatedFee:
    """Fee computed by a calculator, falling back to the context default."""

    calculator: TransactionFeeCalculator | None = None

    def resolve(
        self, transaction: Transaction, default_calculator: TransactionFeeCalculator
    ) -> Amount:
        calculator = (
            self.calculator if self.calculator is not None else default_calculator
        )
        fee = calculator.calculate_minimum_fee(transaction)
        logger.debug("Calculated fee %s with %s", fee, type(calculator).__name__)
        return fee


@dataclass(frozen=True)
class ZeroFeeOverride:
    """Explicit fee request; the requested amount is discarded for zero."""

    requested: Amount

    def resolve(
        self, transaction: Transaction, default_calculator: TransactionFeeCalculator
    ) -> Amount:
        if self.requested != Amount.ZERO:
            logger.warning(
                "Explicit fee %s is not applied, %s transaction fee set to zero",
                self.requested,
                transaction.type.name,
            )
        return Amount.ZERO


FeePolicy = CalculatedFee | ZeroFeeOverride
