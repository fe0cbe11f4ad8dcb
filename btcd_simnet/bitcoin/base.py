# btcd_simnet/bitcoin/base.py

"""
Contrato de capacidades de um backend bitcoin

Novos backends implementam BlockchainRpcNode e se registram em
BACKENDS sem tocar no algoritmo de funding.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from btcd_simnet.client.rpc_client import AsyncBtcdRpcClient
from btcd_simnet.config import FundingConfig
from btcd_simnet.models.chain import BlockchainInfo, WalletInfo
from btcd_simnet.models.node import BitcoinNode, NodeImplementation


class BlockchainRpcNode(ABC):
    """Operações que a orquestração de rede espera de um nó bitcoin"""

    def __init__(self, client: AsyncBtcdRpcClient, config: Optional[FundingConfig] = None):
        self.client = client
        self.config = config or FundingConfig()

    @abstractmethod
    async def create_default_wallet(self, node: BitcoinNode) -> None: ...

    @abstractmethod
    async def get_blockchain_info(self, node: BitcoinNode) -> BlockchainInfo: ...

    @abstractmethod
    async def get_wallet_info(self, node: BitcoinNode) -> WalletInfo: ...

    @abstractmethod
    async def get_new_address(self, node: BitcoinNode) -> str: ...

    @abstractmethod
    async def connect_peers(self, node: BitcoinNode) -> List[str]: ...

    @abstractmethod
    async def mine(self, num_blocks: int, node: BitcoinNode) -> List[str]: ...

    @abstractmethod
    async def ensure_funds(self, node: BitcoinNode, to_address: str, amount: float) -> str: ...

    @abstractmethod
    async def wait_until_online(
        self,
        node: BitcoinNode,
        interval: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> None: ...


BACKENDS: Dict[NodeImplementation, Type[BlockchainRpcNode]] = {}


def register_backend(implementation: NodeImplementation):
    """Decorator que registra a classe como backend da implementação"""
    def _register(cls: Type[BlockchainRpcNode]) -> Type[BlockchainRpcNode]:
        BACKENDS[implementation] = cls
        return cls
    return _register


def get_bitcoin_service(
    node: BitcoinNode,
    client: AsyncBtcdRpcClient,
    config: Optional[FundingConfig] = None,
) -> BlockchainRpcNode:
    """
    Retorna o backend adequado à implementação do nó

    Raises:
        ValueError: Nenhum backend registrado para a implementação
    """
    try:
        backend = BACKENDS[node.implementation]
    except KeyError:
        raise ValueError(f"No bitcoin service can be used for '{node.implementation}' nodes")
    return backend(client, config)
