"""Tests for network identification and time providers."""

from datetime import timedelta
from unittest.mock import Mock, patch

import pytest
import requests

from nem_offchain_core.blockchain.exceptions import NetworkConfigError, NetworkTimeError
from nem_offchain_core.blockchain.network import (
    NEM_EPOCH,
    NodeTimeProvider,
    NetworkType,
    SystemTimeProvider,
    TimeInstant,
    get_network_type,
)


class TestTimeInstant:
    def test_add_and_subtract(self) -> None:
        instant = TimeInstant(1000)

        assert instant.add_seconds(5) == TimeInstant(1005)
        assert instant.add_minutes(2) == TimeInstant(1120)
        assert instant.add_hours(23) == TimeInstant(1000 + 23 * 3600)
        assert instant.add_hours(1).subtract(instant) == 3600

    def test_ordering(self) -> None:
        assert TimeInstant(1) < TimeInstant(2)
        assert TimeInstant.ZERO == TimeInstant(0)

    def test_negative_instant_is_rejected(self) -> None:
        with pytest.raises(NetworkTimeError):
            TimeInstant(-1)

    def test_datetime_conversion(self) -> None:
        instant = TimeInstant.from_datetime(NEM_EPOCH + timedelta(hours=1))

        assert instant == TimeInstant(3600)
        assert instant.to_datetime() == NEM_EPOCH + timedelta(hours=1)

    def test_before_epoch_is_rejected(self) -> None:
        with pytest.raises(NetworkTimeError):
            TimeInstant.from_datetime(NEM_EPOCH - timedelta(seconds=1))


class TestNetworkType:
    def test_versions(self) -> None:
        assert NetworkType.MAINNET.version == 0x68
        assert NetworkType.TESTNET.version == 0x98
        assert get_network_type(0x60) == NetworkType.MIJIN

    def test_unknown_version(self) -> None:
        with pytest.raises(NetworkConfigError):
            get_network_type(0x01)


class TestTimeProviders:
    def test_system_time_is_after_epoch(self) -> None:
        assert SystemTimeProvider().current_time() > TimeInstant.ZERO

    @patch("nem_offchain_core.blockchain.network.requests.get")
    def test_node_time(self, mock_get: Mock) -> None:
        mock_get.return_value.json.return_value = {
            "sendTimeStamp": 123_455_000,
            "receiveTimeStamp": 123_456_789,
        }

        instant = NodeTimeProvider("http://node:7890/", timeout=3).current_time()

        assert instant == TimeInstant(123_456)
        mock_get.assert_called_once_with(
            "http://node:7890/time-sync/network-time", timeout=3
        )

    @patch("nem_offchain_core.blockchain.network.requests.get")
    def test_node_unreachable(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(NetworkTimeError, match="Connection error"):
            NodeTimeProvider("http://node:7890").current_time()

    @patch("nem_offchain_core.blockchain.network.requests.get")
    def test_node_malformed_response(self, mock_get: Mock) -> None:
        mock_get.return_value.json.return_value = {"unexpected": 1}

        with pytest.raises(NetworkTimeError, match="parse"):
            NodeTimeProvider("http://node:7890").current_time()
