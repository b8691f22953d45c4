"""Tests for accounts, addresses and signatures."""

import pytest

from nem_offchain_core.blockchain.exceptions import SigningError
from nem_offchain_core.blockchain.network import NetworkType
from nem_offchain_core.models.account import Account, Address, Signature


class TestAddress:
    def test_derived_address_is_valid(self) -> None:
        account = Account.generate(NetworkType.MAINNET)

        address = account.address

        assert len(address.encoded) == 40
        assert Address.is_valid(address.encoded)
        assert address.network == NetworkType.MAINNET

    def test_from_encoded_accepts_dashed_form(self) -> None:
        encoded = Account.generate().address.encoded
        dashed = "-".join(encoded[i : i + 6] for i in range(0, 40, 6)).lower()

        assert Address.from_encoded(dashed) == Address(encoded)

    def test_checksum_is_verified(self) -> None:
        encoded = Account.generate().address.encoded
        tampered = encoded[:-1] + ("A" if encoded[-1] != "A" else "B")

        assert not Address.is_valid(tampered)
        with pytest.raises(ValueError):
            Address.from_encoded(tampered)

    def test_malformed_address(self) -> None:
        assert not Address.is_valid("not-an-address")
        assert not Address.is_valid("1" * 40)


class TestAccount:
    def test_private_key_round_trip(self) -> None:
        account = Account.generate()

        restored = Account.from_private_key(account.private_key_hex)

        assert restored == account
        assert restored.has_private_key

    def test_public_key_account_cannot_sign(self) -> None:
        account = Account.from_public_key(Account.generate().public_key.hex())

        assert not account.has_private_key
        assert account.private_key_hex is None
        with pytest.raises(SigningError):
            account.sign(b"data")

    def test_sign_and_verify(self) -> None:
        account = Account.generate()

        signature = account.sign(b"data")

        assert account.verify(b"data", signature)
        assert not account.verify(b"other", signature)

    def test_invalid_key_sizes(self) -> None:
        with pytest.raises(ValueError):
            Account(b"short")
        with pytest.raises(ValueError):
            Account.from_private_key("abcd")


class TestSignature:
    def test_hex_round_trip(self) -> None:
        signature = Signature(bytes(range(64)))

        assert Signature.from_hex(signature.hex()) == signature

    def test_invalid_length(self) -> None:
        with pytest.raises(ValueError):
            Signature(b"\x00" * 10)
