"""Network identification and timing utilities for NEM blockchain operations.

This module provides utilities for:
- Network type identification
- NEM epoch based time instants
- Current time providers (wall clock and node network time)
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Final, Protocol, TypeAlias

import requests

from .exceptions import NetworkConfigError, NetworkTimeError

# Type aliases for clarity and type safety
NetworkVersion: TypeAlias = int
Seconds: TypeAlias = int

# Genesis block time of the NEM network, all timestamps are relative to it
NEM_EPOCH: Final[datetime] = datetime(2015, 3, 29, 0, 6, 25, tzinfo=timezone.utc)
NEM_EPOCH_MS: Final[int] = int(NEM_EPOCH.timestamp() * 1000)

NETWORK_TIME_PATH: Final[str] = "/time-sync/network-time"


class NetworkType(str, Enum):
    """Supported NEM network types."""

    MAINNET = "MAINNET"
    TESTNET = "TESTNET"
    MIJIN = "MIJIN"

    @property
    def version(self) -> NetworkVersion:
        """Network version byte used in addresses and transaction versions."""
        return NETWORK_VERSIONS[self]


NETWORK_VERSIONS: dict[NetworkType, NetworkVersion] = {
    NetworkType.MAINNET: 0x68,
    NetworkType.TESTNET: 0x98,
    NetworkType.MIJIN: 0x60,
}


def get_network_type(version: NetworkVersion) -> NetworkType:
    """Convert a network version byte to network type.

    Args:
        version: Network version byte

    Returns:
        Corresponding NetworkType

    Raises:
        NetworkConfigError: If the version byte is unknown
    """
    for network_type, network_version in NETWORK_VERSIONS.items():
        if network_version == version:
            return network_type
    raise NetworkConfigError(f"Unknown network version: {version:#x}")


@dataclass(frozen=True, order=True)
class TimeInstant:
    """Point in time expressed as whole seconds since the NEM epoch."""

    raw_time: Seconds

    ZERO: ClassVar["TimeInstant"]

    def __post_init__(self) -> None:
        if self.raw_time < 0:
            raise NetworkTimeError(f"Time instant cannot be negative: {self.raw_time}")

    def add_seconds(self, seconds: int) -> "TimeInstant":
        return TimeInstant(self.raw_time + seconds)

    def add_minutes(self, minutes: int) -> "TimeInstant":
        return self.add_seconds(minutes * 60)

    def add_hours(self, hours: int) -> "TimeInstant":
        return self.add_seconds(hours * 60 * 60)

    def subtract(self, other: "TimeInstant") -> Seconds:
        """Return the number of seconds between this instant and ``other``."""
        return self.raw_time - other.raw_time

    @classmethod
    def from_posix_ms(cls, posix_ms: int) -> "TimeInstant":
        """Convert a POSIX timestamp in milliseconds to a time instant.

        Raises:
            NetworkTimeError: If the timestamp is before the NEM epoch
        """
        if posix_ms < NEM_EPOCH_MS:
            raise NetworkTimeError(
                f"Timestamp {posix_ms} is before the NEM epoch at {NEM_EPOCH_MS}"
            )
        return cls((posix_ms - NEM_EPOCH_MS) // 1000)

    @classmethod
    def from_datetime(cls, value: datetime) -> "TimeInstant":
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls.from_posix_ms(int(value.timestamp() * 1000))

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(
            (NEM_EPOCH_MS // 1000) + self.raw_time, tz=timezone.utc
        )

    def __str__(self) -> str:
        return str(self.raw_time)


TimeInstant.ZERO = TimeInstant(0)


class TimeProvider(Protocol):
    """Source of the current network time."""

    def current_time(self) -> TimeInstant: ...


class SystemTimeProvider:
    """Time provider backed by the local wall clock."""

    def current_time(self) -> TimeInstant:
        try:
            return TimeInstant.from_posix_ms(int(time.time_ns() * 1e-6))
        except Exception as e:
            raise NetworkTimeError(f"Failed to get current time: {e}") from e


class NodeTimeProvider:
    """Time provider that reads the network time of a NIS node."""

    def __init__(self, node_url: str, timeout: float = 5.0) -> None:
        """Initialize node time provider.

        Args:
            node_url: Base URL of the NIS node, e.g. ``http://127.0.0.1:7890``
            timeout: Request timeout in seconds
        """
        self.node_url = node_url.rstrip("/")
        self.timeout = timeout

    def current_time(self) -> TimeInstant:
        """Fetch the current network time from the node.

        Returns:
            Current network time as reported by the node

        Raises:
            NetworkTimeError: If the node cannot be reached or the
                              response cannot be parsed
        """
        try:
            response = requests.get(
                f"{self.node_url}{NETWORK_TIME_PATH}", timeout=self.timeout
            )
            response.raise_for_status()

            # Node reports milliseconds since the NEM epoch
            network_ms = response.json()["receiveTimeStamp"]
            return TimeInstant(int(network_ms) // 1000)
        except requests.RequestException as e:
            raise NetworkTimeError(
                f"Failed to fetch network time: Connection error - {e}"
            ) from e
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkTimeError(f"Failed to parse network time: {e}") from e
