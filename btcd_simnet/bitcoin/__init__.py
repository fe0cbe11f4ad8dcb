# btcd_simnet/bitcoin/__init__.py

"""
Backends bitcoin da rede simulada
"""

from btcd_simnet.bitcoin.base import BACKENDS, BlockchainRpcNode, get_bitcoin_service, register_backend
from btcd_simnet.bitcoin.btcd_service import BtcdService
from btcd_simnet.bitcoin.peers import connect_peers

__all__ = [
    "BACKENDS",
    "BlockchainRpcNode",
    "BtcdService",
    "connect_peers",
    "get_bitcoin_service",
    "register_backend",
]
