"""Transaction models and their binary serialization."""

import hashlib
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from nem_offchain_core.blockchain.network import TimeInstant
from nem_offchain_core.models.account import Account, Address, Signature

logger = logging.getLogger(__name__)

MICRO_XEM_PER_XEM = 1_000_000
HASH_SIZE = 32
PLAIN_MESSAGE_TYPE = 1


@dataclass(frozen=True, order=True)
class Amount:
    """Quantity of XEM expressed in micro-XEM."""

    micro_xem: int

    ZERO: ClassVar["Amount"]

    def __post_init__(self) -> None:
        if self.micro_xem < 0:
            raise ValueError(f"Amount cannot be negative: {self.micro_xem}")

    @classmethod
    def from_xem(cls, xem: int) -> "Amount":
        return cls(xem * MICRO_XEM_PER_XEM)

    @classmethod
    def from_micro_xem(cls, micro_xem: int) -> "Amount":
        return cls(micro_xem)

    @property
    def num_xem(self) -> int:
        """Whole XEM contained in this amount."""
        return self.micro_xem // MICRO_XEM_PER_XEM

    def __add__(self, other: "Amount") -> "Amount":
        return Amount(self.micro_xem + other.micro_xem)

    def __str__(self) -> str:
        return f"{self.micro_xem / MICRO_XEM_PER_XEM:.6f} XEM"


Amount.ZERO = Amount(0)


class TransactionType(IntEnum):
    """Transaction type identifiers."""

    TRANSFER = 0x0101
    MULTISIG_SIGNATURE = 0x1002
    MULTISIG = 0x1004


def _int32(value: int) -> bytes:
    return value.to_bytes(4, byteorder="little", signed=False)


def _int64(value: int) -> bytes:
    return value.to_bytes(8, byteorder="little", signed=False)


def _sized(data: bytes) -> bytes:
    return _int32(len(data)) + data


class Transaction:
    """Base class for signed transactions.

    Subclasses provide the type specific part of the binary form through
    ``_body_bytes`` and of the dictionary form through ``_body_dict``.
    """

    TRANSACTION_TYPE: ClassVar[TransactionType]
    ENTITY_VERSION: ClassVar[int] = 1

    def __init__(self, timestamp: TimeInstant, signer: Account) -> None:
        self.timestamp = timestamp
        self.signer = signer
        self.fee: Amount = Amount.ZERO
        self.deadline: TimeInstant = TimeInstant.ZERO
        self.signature: Signature | None = None

    @property
    def type(self) -> TransactionType:
        return self.TRANSACTION_TYPE

    @property
    def version(self) -> int:
        return (self.signer.network.version << 24) | self.ENTITY_VERSION

    def _body_bytes(self) -> bytes:
        raise NotImplementedError

    def _body_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        """Serialize the signed portion of the transaction."""
        common = (
            _int32(self.type)
            + _int32(self.version)
            + _int32(self.timestamp.raw_time)
            + _sized(self.signer.public_key)
            + _int64(self.fee.micro_xem)
            + _int32(self.deadline.raw_time)
        )
        return common + self._body_bytes()

    def hash(self) -> bytes:
        return hashlib.sha3_256(self.to_bytes()).digest()

    def sign(self) -> None:
        """Sign the transaction with the signer's own key."""
        self.sign_by(self.signer)

    def sign_by(self, account: Account) -> None:
        """Sign the transaction with another account's key.

        The signer recorded in the transaction is left unchanged.
        """
        self.signature = account.sign(self.to_bytes())
        logger.debug(
            "Signed %s transaction by %s", self.type.name, account.address
        )

    def verify(self) -> bool:
        """Check the signature against the signer's public key."""
        if self.signature is None:
            return False
        return self.signer.verify(self.to_bytes(), self.signature)

    def to_dict(self) -> dict[str, Any]:
        data = {
            "type": int(self.type),
            "version": self.version,
            "timeStamp": self.timestamp.raw_time,
            "signer": self.signer.public_key.hex(),
            "fee": self.fee.micro_xem,
            "deadline": self.deadline.raw_time,
            "signature": self.signature.hex() if self.signature else None,
        }
        data.update(self._body_dict())
        return data


class TransferTransaction(Transaction):
    """Transfer of XEM to a recipient, with an optional plain message."""

    TRANSACTION_TYPE = TransactionType.TRANSFER

    def __init__(
        self,
        timestamp: TimeInstant,
        signer: Account,
        recipient: Address,
        amount: Amount,
        message: bytes | str | None = None,
    ) -> None:
        super().__init__(timestamp, signer)
        self.recipient = recipient
        self.amount = amount
        if isinstance(message, str):
            message = message.encode("utf-8")
        self.message = message or None

    @property
    def message_length(self) -> int:
        return len(self.message) if self.message else 0

    def _body_bytes(self) -> bytes:
        body = _sized(self.recipient.to_bytes()) + _int64(self.amount.micro_xem)
        if self.message is None:
            return body + _int32(0)

        message = _int32(PLAIN_MESSAGE_TYPE) + _sized(self.message)
        return body + _sized(message)

    def _body_dict(self) -> dict[str, Any]:
        return {
            "recipient": str(self.recipient),
            "amount": self.amount.micro_xem,
            "message": (
                {"type": PLAIN_MESSAGE_TYPE, "payload": self.message.hex()}
                if self.message
                else {}
            ),
        }


class MultisigSignatureTransaction(Transaction):
    """A cosigner's approval of a transaction wrapped by a multisig account."""

    TRANSACTION_TYPE = TransactionType.MULTISIG_SIGNATURE

    def __init__(
        self,
        timestamp: TimeInstant,
        signer: Account,
        multisig_address: Address,
        other_transaction_hash: bytes,
    ) -> None:
        super().__init__(timestamp, signer)
        if len(other_transaction_hash) != HASH_SIZE:
            raise ValueError(
                f"Transaction hash must be {HASH_SIZE} bytes, "
                f"got {len(other_transaction_hash)}"
            )
        self.multisig_address = multisig_address
        self.other_transaction_hash = other_transaction_hash

    def _body_bytes(self) -> bytes:
        return _sized(_sized(self.other_transaction_hash)) + _sized(
            self.multisig_address.to_bytes()
        )

    def _body_dict(self) -> dict[str, Any]:
        return {
            "otherHash": {"data": self.other_transaction_hash.hex()},
            "otherAccount": str(self.multisig_address),
        }


class MultisigTransaction(Transaction):
    """Envelope that wraps a transaction issued by a multisig account.

    Co-signatures gathered for the inner transaction are attached to the
    envelope but are not part of its signed bytes.
    """

    TRANSACTION_TYPE = TransactionType.MULTISIG

    def __init__(
        self, timestamp: TimeInstant, signer: Account, other_transaction: Transaction
    ) -> None:
        super().__init__(timestamp, signer)
        self.other_transaction = other_transaction
        self._cosignatures: list[MultisigSignatureTransaction] = []

    @property
    def other_transaction_hash(self) -> bytes:
        return self.other_transaction.hash()

    @property
    def cosignatures(self) -> tuple[MultisigSignatureTransaction, ...]:
        return tuple(self._cosignatures)

    def add_signature(self, cosignature: MultisigSignatureTransaction) -> None:
        """Attach a co-signature for the wrapped transaction.

        Raises:
            ValueError: If the co-signature approves a different transaction
        """
        if cosignature.other_transaction_hash != self.other_transaction_hash:
            raise ValueError(
                "Co-signature does not match the wrapped transaction hash: "
                f"{cosignature.other_transaction_hash.hex()}"
            )
        self._cosignatures.append(cosignature)

    def _body_bytes(self) -> bytes:
        return _sized(self.other_transaction.to_bytes())

    def _body_dict(self) -> dict[str, Any]:
        return {
            "otherTrans": self.other_transaction.to_dict(),
            "signatures": [cosig.to_dict() for cosig in self._cosignatures],
        }
