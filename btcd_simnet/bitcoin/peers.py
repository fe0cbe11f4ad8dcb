# btcd_simnet/bitcoin/peers.py

"""
Conexão best-effort de peers

Falhas individuais são logadas e ignoradas; sucesso parcial é o caso normal
(ex: peer ainda subindo).
"""

from typing import List

from btcd_simnet.client.exceptions import BtcdClientError
from btcd_simnet.client.rpc_client import AsyncBtcdRpcClient
from btcd_simnet.models.node import BitcoinNode
from btcd_simnet.utils.logging import get_logger

logger = get_logger("bitcoin.peers")


async def connect_peers(client: AsyncBtcdRpcClient, node: BitcoinNode) -> List[str]:
    """
    Envia `addnode <peer> add` para cada peer configurado do nó

    Args:
        client: Cliente RPC
        node: Nó que deve discar para os peers

    Returns:
        Peers aceitos pelo nó
    """
    connected = []
    for peer in node.peers:
        try:
            await client.call(node, "addnode", [peer, "add"])
            connected.append(peer)
        except BtcdClientError as e:
            logger.debug(f"Failed to add peer '{peer}' to btcd node {node.name}: {e}")

    if len(connected) < len(node.peers):
        logger.warning(f"⚠️  {node.name}: connected {len(connected)}/{len(node.peers)} peers")
    else:
        logger.info(f"✅ {node.name}: connected {len(connected)} peers")
    return connected
