""" Configuration classes for the CLI. """

from .keys import KeyManager, WalletConfig
from .multisig import MultisigConfig
from .network import NetworkConfig
from .utils import load_yaml_config, setup_logging
