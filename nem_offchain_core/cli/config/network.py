from dataclasses import dataclass
from pathlib import Path

from nem_offchain_core.blockchain.exceptions import NetworkConfigError
from nem_offchain_core.blockchain.network import NetworkType

from .keys import WalletConfig
from .multisig import MultisigConfig
from .utils import load_yaml_config


@dataclass
class NetworkConfig:
    """Network-specific configuration."""

    network: NetworkType
    wallet: WalletConfig
    node_url: str | None = None
    timeout: float = 10.0
    use_network_time: bool = False
    multisig: MultisigConfig | None = None

    @classmethod
    def from_yaml(cls, path: Path | str) -> "NetworkConfig":
        """Load network configuration from YAML."""
        data = load_yaml_config(path)
        config = cls.from_dict(data.get("network") or {})
        if data.get("wallet"):
            config.wallet = WalletConfig.from_dict(data["wallet"])
        if data.get("multisig"):
            config.multisig = MultisigConfig.from_dict(data["multisig"])
        return config

    @classmethod
    def from_dict(cls, data: dict) -> "NetworkConfig":
        """Create network config from dictionary."""
        try:
            network = NetworkType[str(data.get("network", "TESTNET")).upper()]
        except KeyError as e:
            raise NetworkConfigError(f"Unknown network: {data.get('network')}") from e

        return cls(
            network=network,
            wallet=WalletConfig.from_dict(data.get("wallet") or {}),
            node_url=data.get("node_url"),
            timeout=float(data.get("timeout", 10.0)),
            use_network_time=bool(data.get("use_network_time", False)),
        )

    def validate(self) -> None:
        """Validate node configuration."""
        if not self.node_url:
            raise NetworkConfigError("node_url must be provided")
        if not self.node_url.startswith(("http://", "https://")):
            raise NetworkConfigError(f"node_url must be an http(s) URL: {self.node_url}")
        if self.timeout <= 0:
            raise NetworkConfigError("timeout must be positive")
