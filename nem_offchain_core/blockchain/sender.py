"""Announcing built transactions to a NIS node."""

import logging
from dataclasses import dataclass
from typing import Final, Protocol

import requests

from nem_offchain_core.models.transactions import MultisigTransaction, Transaction

from .exceptions import TransactionSubmissionError

logger = logging.getLogger(__name__)

ANNOUNCE_PATH: Final[str] = "/transaction/announce"
SUCCESS_CODE: Final[int] = 1


class TransactionSender(Protocol):
    """Collaborator that hands a built multisig transaction to the network."""

    def send_multisig_transaction(
        self, transaction: MultisigTransaction
    ) -> MultisigTransaction: ...


@dataclass
class AnnounceResult:
    """Result reported by the node for an announced transaction."""

    code: int
    message: str
    transaction_hash: str | None = None
    inner_transaction_hash: str | None = None

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE

    @classmethod
    def from_dict(cls, data: dict) -> "AnnounceResult":
        return cls(
            code=int(data["code"]),
            message=str(data.get("message", "")),
            transaction_hash=(data.get("transactionHash") or {}).get("data"),
            inner_transaction_hash=(data.get("innerTransactionHash") or {}).get(
                "data"
            ),
        )


class NodeTransactionSender:
    """Announces signed transactions through a NIS node's REST API."""

    def __init__(
        self,
        node_url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.node_url = node_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def announce(self, transaction: Transaction) -> AnnounceResult:
        """Announce a signed transaction.

        Args:
            transaction: Signed transaction to announce

        Returns:
            Announce result reported by the node

        Raises:
            TransactionSubmissionError: If the transaction is unsigned, the
                node cannot be reached or it rejects the transaction
        """
        if transaction.signature is None:
            raise TransactionSubmissionError("Cannot announce an unsigned transaction")

        payload = {
            "data": transaction.to_bytes().hex(),
            "signature": transaction.signature.hex(),
        }

        logger.info(
            "Announcing %s transaction to %s", transaction.type.name, self.node_url
        )
        try:
            response = self.session.post(
                f"{self.node_url}{ANNOUNCE_PATH}", json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            result = AnnounceResult.from_dict(response.json())
        except requests.RequestException as e:
            raise TransactionSubmissionError(
                f"Failed to announce transaction: Connection error - {e}"
            ) from e
        except (KeyError, TypeError, ValueError) as e:
            raise TransactionSubmissionError(
                f"Failed to parse announce result: {e}"
            ) from e

        if not result.is_success:
            raise TransactionSubmissionError(
                f"Transaction rejected by node: {result.message} (code {result.code})"
            )

        logger.info("Transaction accepted: %s", result.transaction_hash)
        return result

    def send_multisig_transaction(
        self, transaction: MultisigTransaction
    ) -> MultisigTransaction:
        self.announce(transaction)
        return transaction
