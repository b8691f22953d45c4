"""Base CLI utilities and helper functions."""

import logging

from nem_offchain_core.blockchain.network import NodeTimeProvider, SystemTimeProvider
from nem_offchain_core.blockchain.sender import NodeTransactionSender
from nem_offchain_core.builders.context import BuilderContext
from nem_offchain_core.fees.calculator import DefaultTransactionFeeCalculator

from .config.network import NetworkConfig

logger = logging.getLogger(__name__)


def build_context(network_config: NetworkConfig) -> BuilderContext:
    """Create builder collaborators from network configuration.

    Args:
        network_config: Validated network configuration

    Returns:
        Builder context talking to the configured node
    """
    if network_config.use_network_time:
        logger.info("Using network time from %s", network_config.node_url)
        time_provider = NodeTimeProvider(
            network_config.node_url, timeout=network_config.timeout
        )
    else:
        time_provider = SystemTimeProvider()

    return BuilderContext(
        time_provider=time_provider,
        fee_calculator=DefaultTransactionFeeCalculator(),
        transaction_sender=NodeTransactionSender(
            network_config.node_url, timeout=network_config.timeout
        ),
    )
