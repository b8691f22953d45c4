"""Key and wallet management utilities for CLI operations."""

from dataclasses import dataclass
from pathlib import Path

from nem_offchain_core.blockchain.network import NetworkType
from nem_offchain_core.models.account import Account


@dataclass
class WalletConfig:
    """Configuration for wallet loading."""

    private_key: str | None = None
    private_key_path: str | None = None

    @classmethod
    def from_dict(cls, config: dict) -> "WalletConfig":
        """Create wallet config from dictionary."""
        return cls(
            private_key=config.get("private_key"),
            private_key_path=config.get("private_key_path"),
        )


class KeyManager:
    """Loads signing accounts from raw keys or key files."""

    @staticmethod
    def load_from_file(
        private_key_path: Path | str, network: NetworkType = NetworkType.TESTNET
    ) -> Account:
        """Load an account from a file holding a hex encoded private key.

        Args:
            private_key_path: Path to the private key file
            network: Target network

        Returns:
            Account able to sign transactions
        """
        private_key = Path(private_key_path).read_text(encoding="utf-8").strip()
        return Account.from_private_key(private_key, network)

    @classmethod
    def load_from_config(
        cls, config: WalletConfig, network: NetworkType = NetworkType.TESTNET
    ) -> Account:
        """Load the signing account from configuration.

        Args:
            config: Wallet configuration
            network: Target network

        Returns:
            Account able to sign transactions

        Raises:
            ValueError: If neither a private key nor a key path is provided
        """
        if config.private_key:
            return Account.from_private_key(config.private_key, network)

        elif config.private_key_path:
            return cls.load_from_file(config.private_key_path, network)

        else:
            raise ValueError("Must provide either private_key or private_key_path")
