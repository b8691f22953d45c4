"""Fee calculators that compute the minimum network fee of a transaction."""

import logging
from typing import Protocol

from nem_offchain_core.blockchain.exceptions import FeeCalculationError
from nem_offchain_core.models.transactions import (
    Amount,
    MultisigSignatureTransaction,
    MultisigTransaction,
    Transaction,
    TransferTransaction,
)

logger = logging.getLogger(__name__)

FEE_UNIT = Amount.from_micro_xem(50_000)
FEE_UNITS_PER_MULTISIG = 3
MAX_TRANSFER_FEE_UNITS = 25
XEM_PER_TRANSFER_FEE_UNIT = 10_000
MESSAGE_BYTES_PER_FEE_UNIT = 32


class TransactionFeeCalculator(Protocol):
    """Strategy that decides the minimum fee of a transaction."""

    def calculate_minimum_fee(self, transaction: Transaction) -> Amount: ...

    def is_fee_valid(self, transaction: Transaction) -> bool: ...


def _units(count: int) -> Amount:
    return Amount(FEE_UNIT.micro_xem * count)


class DefaultTransactionFeeCalculator:
    """Fee schedule of the NEM network in fee units of 0.05 XEM."""

    def calculate_minimum_fee(self, transaction: Transaction) -> Amount:
        """Calculate the minimum fee for a transaction.

        Args:
            transaction: Transaction to price

        Returns:
            Minimum fee accepted by the network

        Raises:
            FeeCalculationError: If the transaction cannot be priced
        """
        try:
            if isinstance(transaction, TransferTransaction):
                return self._transfer_fee(transaction)

            if isinstance(
                transaction, (MultisigTransaction, MultisigSignatureTransaction)
            ):
                return _units(FEE_UNITS_PER_MULTISIG)

            raise FeeCalculationError(
                f"Unsupported transaction type: {type(transaction).__name__}"
            )

        except FeeCalculationError:
            raise

        except Exception as e:
            raise FeeCalculationError(f"Fee calculation failed: {e}") from e

    def _transfer_fee(self, transaction: TransferTransaction) -> Amount:
        xem_units = min(
            MAX_TRANSFER_FEE_UNITS,
            max(1, transaction.amount.num_xem // XEM_PER_TRANSFER_FEE_UNIT),
        )
        message_units = 0
        if transaction.message_length:
            message_units = (
                transaction.message_length // MESSAGE_BYTES_PER_FEE_UNIT + 1
            )
        return _units(xem_units + message_units)

    def is_fee_valid(self, transaction: Transaction) -> bool:
        minimum = self.calculate_minimum_fee(transaction)
        if transaction.fee < minimum:
            logger.warning(
                "Fee %s is below the minimum %s", transaction.fee, minimum
            )
            return False
        return True


class FixedFeeCalculator:
    """Calculator that prices every transaction at the same amount."""

    def __init__(self, fee: Amount) -> None:
        self.fee = fee

    def calculate_minimum_fee(self, transaction: Transaction) -> Amount:
        return self.fee

    def is_fee_valid(self, transaction: Transaction) -> bool:
        return transaction.fee >= self.fee
