"""Fluent builder for signed multisig envelope transactions."""

import logging

from nem_offchain_core.blockchain.exceptions import InvalidBuilderStateError
from nem_offchain_core.blockchain.network import TimeInstant
from nem_offchain_core.blockchain.sender import TransactionSender
from nem_offchain_core.fees.calculator import TransactionFeeCalculator
from nem_offchain_core.fees.policy import CalculatedFee, FeePolicy, ZeroFeeOverride
from nem_offchain_core.models.account import Account, Signature
from nem_offchain_core.models.transactions import (
    Amount,
    MultisigSignatureTransaction,
    MultisigTransaction,
    Transaction,
)

from .context import BuilderContext, get_default_context

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE_HOURS = 23


class MultisigTransactionBuilder:
    """Entry point for building multisig envelope transactions.

    Usage::

        tx = (
            MultisigTransactionBuilder(context)
            .start_with_sender(cosigner)
            .with_inner_transaction(transfer)
            .add_cosignature(cosignature)
            .build()
        )

    Without an injected context the process-wide default context is read
    when the transaction is built.
    """

    def __init__(self, context: BuilderContext | None = None) -> None:
        self.context = context

    def start_with_sender(self, sender: Account) -> "MultisigInnerTransactionStep":
        """Begin a transaction initiated by ``sender``.

        Raises:
            InvalidBuilderStateError: If no sender is given
        """
        if sender is None:
            raise InvalidBuilderStateError("sender")
        return MultisigInnerTransactionStep(sender, self.context)


class MultisigInnerTransactionStep:
    """First phase: only the wrapped transaction can be supplied."""

    def __init__(self, sender: Account, context: BuilderContext | None) -> None:
        self._sender = sender
        self._context = context

    def with_inner_transaction(
        self, transaction: Transaction
    ) -> "MultisigTransactionConfigurator":
        """Record the transaction to wrap.

        Raises:
            InvalidBuilderStateError: If no transaction is given
        """
        if transaction is None:
            raise InvalidBuilderStateError("inner_transaction")
        return MultisigTransactionConfigurator(self._sender, transaction, self._context)


class MultisigTransactionConfigurator:
    """Second phase: optional settings and the terminal build operations."""

    def __init__(
        self,
        sender: Account,
        inner_transaction: Transaction,
        context: BuilderContext | None = None,
    ) -> None:
        self._sender = sender
        self._inner_transaction = inner_transaction
        self._context = context

        self._fee: Amount | None = None
        self._fee_calculator: TransactionFeeCalculator | None = None
        self._signed_by: Account | None = None
        self._deadline: TimeInstant | None = None
        self._signature: Signature | None = None
        self._cosignatures: list[MultisigSignatureTransaction] = []

    def with_timestamp(
        self, timestamp: TimeInstant
    ) -> "MultisigTransactionConfigurator":
        # Ignored: the timestamp is always taken from the time provider.
        logger.debug("Ignoring explicit timestamp %s", timestamp)
        return self

    def with_signed_by(self, account: Account) -> "MultisigTransactionConfigurator":
        self._signed_by = account
        return self

    def with_fee(self, amount: Amount | None) -> "MultisigTransactionConfigurator":
        """Request an explicit fee.

        The built transaction carries a zero fee whenever an explicit fee
        was requested; the requested amount itself is not applied. ``None``
        clears the request.
        """
        self._fee = amount
        return self

    def with_fee_calculator(
        self, calculator: TransactionFeeCalculator
    ) -> "MultisigTransactionConfigurator":
        """Use ``calculator`` unless an explicit fee was requested."""
        self._fee_calculator = calculator
        return self

    def with_deadline(self, deadline: TimeInstant) -> "MultisigTransactionConfigurator":
        self._deadline = deadline
        return self

    def with_signature(
        self, signature: Signature
    ) -> "MultisigTransactionConfigurator":
        self._signature = signature
        return self

    def add_cosignature(
        self, cosignature: MultisigSignatureTransaction
    ) -> "MultisigTransactionConfigurator":
        self._cosignatures.append(cosignature)
        return self

    @property
    def fee_policy(self) -> FeePolicy:
        if self._fee is not None:
            return ZeroFeeOverride(self._fee)
        return CalculatedFee(self._fee_calculator)

    def _resolve_context(self) -> BuilderContext:
        return self._context if self._context is not None else get_default_context()

    def _validate(self) -> None:
        if self._sender is None:
            raise InvalidBuilderStateError("sender")
        if self._inner_transaction is None:
            raise InvalidBuilderStateError("inner_transaction")

    def build(self) -> MultisigTransaction:
        """Build and sign the multisig transaction.

        Returns:
            Signed multisig transaction

        Raises:
            InvalidBuilderStateError: If a required field is missing
        """
        self._validate()
        context = self._resolve_context()

        timestamp = context.time_provider.current_time()
        transaction = MultisigTransaction(
            timestamp, self._sender, self._inner_transaction
        )

        transaction.fee = self.fee_policy.resolve(transaction, context.fee_calculator)

        if self._deadline is not None:
            transaction.deadline = self._deadline
        else:
            transaction.deadline = timestamp.add_hours(DEFAULT_DEADLINE_HOURS)

        if self._signature is not None:
            transaction.signature = self._signature
        if self._signed_by is not None:
            transaction.sign_by(self._signed_by)

        for cosignature in self._cosignatures:
            transaction.add_signature(cosignature)

        transaction.sign()

        logger.info(
            "Built multisig transaction by %s with fee %s and %d co-signature(s)",
            self._sender.address,
            transaction.fee,
            len(transaction.cosignatures),
        )
        return transaction

    def build_and_send(
        self, sender: TransactionSender | None = None
    ) -> MultisigTransaction:
        """Build the transaction and hand it to the transmission collaborator.

        Args:
            sender: Collaborator to use instead of the context's one

        Returns:
            The transaction returned by the collaborator

        Raises:
            InvalidBuilderStateError: If no transmission collaborator is available
        """
        transaction_sender = sender
        if transaction_sender is None:
            transaction_sender = self._resolve_context().transaction_sender
        if transaction_sender is None:
            raise InvalidBuilderStateError(
                "transaction_sender", "No transaction sender configured"
            )
        return transaction_sender.send_multisig_transaction(self.build())
