"""Tests for transaction models and their binary form."""

import pytest

from nem_offchain_core.blockchain.exceptions import SigningError
from nem_offchain_core.models.account import Account
from nem_offchain_core.models.transactions import (
    Amount,
    MultisigSignatureTransaction,
    MultisigTransaction,
    TransactionType,
    TransferTransaction,
)

from .test_utils import NOW, create_cosignature, create_transfer

COMMON_SIZE = 60


class TestAmount:
    def test_conversions(self) -> None:
        amount = Amount.from_xem(12)

        assert amount.micro_xem == 12_000_000
        assert amount.num_xem == 12
        assert Amount.from_micro_xem(1_500_000).num_xem == 1
        assert str(Amount(1_500_000)) == "1.500000 XEM"

    def test_arithmetic_and_ordering(self) -> None:
        assert Amount(1) + Amount(2) == Amount(3)
        assert Amount(1) < Amount(2)
        assert Amount.ZERO == Amount(0)

    def test_negative_amount_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Amount(-1)


class TestSerialization:
    def setup_method(self, method) -> None:
        self.multisig_account = Account.generate()
        self.cosigner = Account.generate()

    def test_transfer_without_message(self) -> None:
        transfer = create_transfer(self.multisig_account)

        data = transfer.to_bytes()

        assert len(data) == COMMON_SIZE + 56
        assert data[:4] == (0x0101).to_bytes(4, "little")
        assert data[4:8] == (0x98000001).to_bytes(4, "little")
        assert data[8:12] == NOW.raw_time.to_bytes(4, "little")
        assert data[16:48] == self.multisig_account.public_key

    def test_transfer_with_message(self) -> None:
        transfer = create_transfer(self.multisig_account, message="hi")

        assert len(transfer.to_bytes()) == COMMON_SIZE + 52 + 14
        assert transfer.message_length == 2
        assert transfer.to_dict()["message"] == {"type": 1, "payload": b"hi".hex()}

    def test_empty_message_is_dropped(self) -> None:
        transfer = TransferTransaction(
            NOW, self.multisig_account, self.cosigner.address, Amount(1), ""
        )

        assert transfer.message is None
        assert transfer.message_length == 0

    def test_multisig_wraps_inner_bytes(self) -> None:
        inner = create_transfer(self.multisig_account)
        envelope = MultisigTransaction(NOW, self.cosigner, inner)

        data = envelope.to_bytes()

        assert envelope.type == TransactionType.MULTISIG
        assert len(data) == COMMON_SIZE + 4 + len(inner.to_bytes())
        assert data.endswith(inner.to_bytes())

    def test_cosignature_layout(self) -> None:
        inner = create_transfer(self.multisig_account)
        cosignature = create_cosignature(self.cosigner, self.multisig_account, inner)

        assert len(cosignature.to_bytes()) == COMMON_SIZE + 40 + 44
        assert cosignature.to_dict()["otherHash"] == {"data": inner.hash().hex()}
        assert cosignature.to_dict()["otherAccount"] == str(
            self.multisig_account.address
        )

    def test_cosignature_requires_full_hash(self) -> None:
        with pytest.raises(ValueError):
            MultisigSignatureTransaction(
                NOW, self.cosigner, self.multisig_account.address, b"short"
            )


class TestSigning:
    def setup_method(self, method) -> None:
        self.multisig_account = Account.generate()
        self.cosigner = Account.generate()
        self.inner = create_transfer(self.multisig_account)

    def test_sign_and_verify(self) -> None:
        envelope = MultisigTransaction(NOW, self.cosigner, self.inner)

        assert not envelope.verify()
        envelope.sign()

        assert envelope.verify()

    def test_sign_by_keeps_signer(self) -> None:
        other = Account.generate()
        envelope = MultisigTransaction(NOW, self.cosigner, self.inner)

        envelope.sign_by(other)

        assert envelope.signer == self.cosigner
        assert envelope.signature is not None
        assert not envelope.verify()

    def test_sign_without_private_key(self) -> None:
        watch_only = Account.from_public_key(self.cosigner.public_key)
        envelope = MultisigTransaction(NOW, watch_only, self.inner)

        with pytest.raises(SigningError):
            envelope.sign()

    def test_changed_fee_invalidates_signature(self) -> None:
        envelope = MultisigTransaction(NOW, self.cosigner, self.inner)
        envelope.sign()

        envelope.fee = Amount(1)

        assert not envelope.verify()


class TestMultisigCosignatures:
    def setup_method(self, method) -> None:
        self.multisig_account = Account.generate()
        self.cosigner = Account.generate()
        self.inner = create_transfer(self.multisig_account)
        self.envelope = MultisigTransaction(NOW, self.cosigner, self.inner)

    def test_cosignatures_are_not_signed_bytes(self) -> None:
        before = self.envelope.to_bytes()

        self.envelope.add_signature(
            create_cosignature(Account.generate(), self.multisig_account, self.inner)
        )

        assert self.envelope.to_bytes() == before
        assert len(self.envelope.cosignatures) == 1

    def test_cosignatures_view_is_read_only(self) -> None:
        cosignatures = self.envelope.cosignatures

        assert cosignatures == ()
        assert isinstance(cosignatures, tuple)

    def test_mismatched_cosignature(self) -> None:
        other = create_transfer(self.multisig_account, Amount.from_xem(7))

        with pytest.raises(ValueError):
            self.envelope.add_signature(
                create_cosignature(self.cosigner, self.multisig_account, other)
            )

    def test_to_dict_includes_inner_and_signatures(self) -> None:
        cosignature = create_cosignature(
            Account.generate(), self.multisig_account, self.inner
        )
        self.envelope.add_signature(cosignature)
        self.envelope.sign()

        data = self.envelope.to_dict()

        assert data["type"] == 0x1004
        assert data["signer"] == self.cosigner.public_key.hex()
        assert data["otherTrans"]["type"] == 0x0101
        assert data["signatures"] == [cosignature.to_dict()]
        assert data["signature"] == self.envelope.signature.hex()
