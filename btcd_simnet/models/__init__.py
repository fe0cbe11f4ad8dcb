# btcd_simnet/models/__init__.py
"""
Modelos de dados para btcd-simnet
Estruturas dataclass para validação e organização de dados
"""

from .node import (
    Status,
    NodeImplementation,
    BitcoinNode,
    LightningNode,
    find_node,
)
from .chain import (
    BlockchainInfo,
    WalletInfo,
    WalletTransaction,
)
from .simulation import (
    Simulation,
    create_simulation,
)

__all__ = [
    'Status',
    'NodeImplementation',
    'BitcoinNode',
    'LightningNode',
    'find_node',
    'BlockchainInfo',
    'WalletInfo',
    'WalletTransaction',
    'Simulation',
    'create_simulation',
]
