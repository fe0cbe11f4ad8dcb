# btcd_simnet/__init__.py

"""
btcd-simnet: funding de nós btcd e controle de simulações de pagamento
em redes locais bitcoin + lightning
"""

__version__ = "0.1.0"

from btcd_simnet.config import FundingConfig
from btcd_simnet.client import AsyncBtcdRpcClient
from btcd_simnet.bitcoin import BtcdService, get_bitcoin_service
from btcd_simnet.simulation import SimulationController

__all__ = [
    "FundingConfig",
    "AsyncBtcdRpcClient",
    "BtcdService",
    "get_bitcoin_service",
    "SimulationController",
]
