# btcd_simnet/utils/__init__.py

"""
Utilities para btcd-simnet
"""

from .logging import setup_logging, get_logger, logger
from .keys import snake_to_camel, snake_keys_to_camel
from .validation import (
    validate_host,
    validate_port,
    validate_node_name,
    validate_peer_address,
    validate_node_config,
)

__all__ = [
    # Logging
    'setup_logging',
    'get_logger',
    'logger',

    # Keys
    'snake_to_camel',
    'snake_keys_to_camel',

    # Validation
    'validate_host',
    'validate_port',
    'validate_node_name',
    'validate_peer_address',
    'validate_node_config',
]
