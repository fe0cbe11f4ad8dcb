# btcd_simnet/client/__init__.py

"""
Cliente para interação com nós btcd

Fornece o cliente JSON-RPC assíncrono e a hierarquia de exceções
"""

from btcd_simnet.client.exceptions import (
    BtcdClientError,
    BtcdRpcError,
    BtcdTransportError,
    BtcdTimeoutError,
)
from btcd_simnet.client.rpc_client import AsyncBtcdRpcClient

__all__ = [
    "AsyncBtcdRpcClient",
    "BtcdClientError",
    "BtcdRpcError",
    "BtcdTransportError",
    "BtcdTimeoutError",
]
