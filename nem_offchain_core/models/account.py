"""Account, address and signature models backed by Ed25519 keys."""

import base64
import hashlib
import logging
from dataclasses import dataclass, field

from nacl.encoding import RawEncoder
from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

from nem_offchain_core.blockchain.exceptions import SigningError
from nem_offchain_core.blockchain.network import NetworkType, get_network_type

logger = logging.getLogger(__name__)

PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 32
SIGNATURE_SIZE = 64
ADDRESS_HASH_SIZE = 20
ADDRESS_CHECKSUM_SIZE = 4
ENCODED_ADDRESS_SIZE = 40


def _address_checksum(payload: bytes) -> bytes:
    return hashlib.sha3_256(payload).digest()[:ADDRESS_CHECKSUM_SIZE]


@dataclass(frozen=True)
class Address:
    """Base32 encoded account address.

    The decoded form is ``version (1) | key hash (20) | checksum (4)``.
    """

    encoded: str

    @classmethod
    def from_public_key(cls, public_key: bytes, network: NetworkType) -> "Address":
        """Derive the address of a public key on the given network."""
        key_hash = hashlib.blake2b(
            hashlib.sha3_256(public_key).digest(), digest_size=ADDRESS_HASH_SIZE
        ).digest()
        payload = bytes([network.version]) + key_hash
        decoded = payload + _address_checksum(payload)
        return cls(base64.b32encode(decoded).decode("ascii"))

    @classmethod
    def from_encoded(cls, encoded: str) -> "Address":
        """Parse an encoded address, accepting the dashed display form.

        Raises:
            ValueError: If the address is malformed or the checksum is wrong
        """
        normalized = encoded.replace("-", "").strip().upper()
        if not cls.is_valid(normalized):
            raise ValueError(f"Invalid address: {encoded}")
        return cls(normalized)

    @staticmethod
    def is_valid(encoded: str) -> bool:
        if len(encoded) != ENCODED_ADDRESS_SIZE:
            return False
        try:
            decoded = base64.b32decode(encoded)
            get_network_type(decoded[0])
        except Exception:  # pylint: disable=broad-except
            return False

        payload = decoded[: 1 + ADDRESS_HASH_SIZE]
        return decoded[1 + ADDRESS_HASH_SIZE :] == _address_checksum(payload)

    @property
    def network(self) -> NetworkType:
        return get_network_type(base64.b32decode(self.encoded)[0])

    def to_bytes(self) -> bytes:
        return self.encoded.encode("ascii")

    def __str__(self) -> str:
        return self.encoded


@dataclass(frozen=True)
class Signature:
    """Ed25519 signature over a transaction's binary form."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != SIGNATURE_SIZE:
            raise ValueError(
                f"Signature must be {SIGNATURE_SIZE} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_hex(cls, value: str) -> "Signature":
        return cls(bytes.fromhex(value))

    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class Account:
    """Network account identified by its public key.

    An account may additionally hold the private key, in which case it can
    sign transactions.
    """

    public_key: bytes
    network: NetworkType = NetworkType.TESTNET
    signing_key: SigningKey | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.public_key) != PUBLIC_KEY_SIZE:
            raise ValueError(
                f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(self.public_key)}"
            )

    @classmethod
    def generate(cls, network: NetworkType = NetworkType.TESTNET) -> "Account":
        """Create an account with a freshly generated key pair."""
        signing_key = SigningKey.generate()
        return cls(bytes(signing_key.verify_key), network, signing_key)

    @classmethod
    def from_private_key(
        cls, private_key: str | bytes, network: NetworkType = NetworkType.TESTNET
    ) -> "Account":
        """Load an account from a 32 byte private key (raw or hex)."""
        if isinstance(private_key, str):
            private_key = bytes.fromhex(private_key.strip())
        if len(private_key) != PRIVATE_KEY_SIZE:
            raise ValueError(
                f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
            )

        signing_key = SigningKey(private_key, encoder=RawEncoder)
        return cls(bytes(signing_key.verify_key), network, signing_key)

    @classmethod
    def from_public_key(
        cls, public_key: str | bytes, network: NetworkType = NetworkType.TESTNET
    ) -> "Account":
        """Create a verify-only account from a public key (raw or hex)."""
        if isinstance(public_key, str):
            public_key = bytes.fromhex(public_key.strip())
        return cls(public_key, network)

    @property
    def address(self) -> Address:
        return Address.from_public_key(self.public_key, self.network)

    @property
    def has_private_key(self) -> bool:
        return self.signing_key is not None

    @property
    def private_key_hex(self) -> str | None:
        if self.signing_key is None:
            return None
        return bytes(self.signing_key).hex()

    def sign(self, data: bytes) -> Signature:
        """Sign data with this account's private key.

        Raises:
            SigningError: If the account has no private key
        """
        if self.signing_key is None:
            raise SigningError(f"Account {self.address} has no private key to sign with")
        return Signature(self.signing_key.sign(data).signature)

    def verify(self, data: bytes, signature: Signature) -> bool:
        try:
            VerifyKey(self.public_key).verify(data, signature.value)
            return True
        except BadSignatureError:
            logger.warning("Invalid signature for account: %s", self.address)
            return False

    def __str__(self) -> str:
        return str(self.address)
