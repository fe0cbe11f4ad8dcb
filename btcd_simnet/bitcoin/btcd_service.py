# btcd_simnet/bitcoin/btcd_service.py

"""
Backend btcd: orquestração de fundos via JSON-RPC

Antes de enviar, minera blocos suficientes para maturar coinbase e cobrir o
valor pedido, respeitando o calendário de halving da recompensa.
"""

import asyncio
import math
from typing import List, Optional

from btcd_simnet.bitcoin.base import BlockchainRpcNode, register_backend
from btcd_simnet.bitcoin.peers import connect_peers
from btcd_simnet.models.chain import BlockchainInfo, WalletInfo, WalletTransaction
from btcd_simnet.models.node import BitcoinNode, NodeImplementation
from btcd_simnet.utils.logging import get_logger
from btcd_simnet.utils.polling import wait_for

logger = get_logger("bitcoin.btcd")


@register_backend(NodeImplementation.BTCD)
class BtcdService(BlockchainRpcNode):
    """
    Serviço de funding para nós btcd

    Todas as chamadas RPC de uma operação são sequenciais.
    """

    async def create_default_wallet(self, node: BitcoinNode) -> None:
        """btcwallet mantém uma única carteira; nada a criar"""
        logger.debug(f"{node.name}: btcd uses a single default wallet")

    async def get_blockchain_info(self, node: BitcoinNode) -> BlockchainInfo:
        logger.debug(f"Getting blockchain info for btcd node {node.name}")
        result = await self.client.call(node, "getblockchaininfo", [])
        return BlockchainInfo.from_result(result)

    async def get_wallet_info(self, node: BitcoinNode) -> WalletInfo:
        result = await self.client.call(node, "getwalletinfo", [])
        return WalletInfo.from_result(result)

    async def get_new_address(self, node: BitcoinNode) -> str:
        return await self.client.call(node, "getnewaddress", [])

    async def list_transactions(self, node: BitcoinNode) -> List[WalletTransaction]:
        result = await self.client.call(node, "listtransactions", [])
        return [WalletTransaction.from_result(tx) for tx in result or []]

    async def connect_peers(self, node: BitcoinNode) -> List[str]:
        return await connect_peers(self.client, node)

    async def mine(self, num_blocks: int, node: BitcoinNode) -> List[str]:
        """
        Minera blocos para um endereço novo da carteira

        Returns:
            Hashes dos blocos gerados
        """
        address = await self.get_new_address(node)
        logger.info(f"⛏️  {node.name}: mining {num_blocks} block(s) to {address}")
        return await self.client.call(node, "generatetoaddress", [num_blocks, address])

    async def ensure_funds(self, node: BitcoinNode, to_address: str, amount: float) -> str:
        """
        Garante saldo e envia `amount` para `to_address`

        Se o saldo não cobre o valor, matura coinbase e minera os blocos
        necessários antes de desbloquear a carteira e enviar.

        Args:
            node: Nó que paga
            to_address: Endereço de destino
            amount: Valor em BTC

        Returns:
            txid do envio

        Raises:
            BtcdRpcError: Erro retornado pelo nó (sem retry)
            BtcdTransportError: Nó inalcançável
        """
        chain = await self.get_blockchain_info(node)
        wallet = await self.get_wallet_info(node)

        if wallet.balance > amount:
            logger.debug(f"{node.name}: balance {wallet.balance} covers {amount}, skipping mining")
        else:
            await self.mature_coinbase(node)
            await self.mine(self.blocks_needed(chain.blocks, amount - wallet.balance), node)

        await self.client.call(
            node,
            "walletpassphrase",
            [self.config.wallet_passphrase, self.config.wallet_unlock_seconds],
        )

        txid = await self.client.call(node, "sendtoaddress", [to_address, amount])
        logger.info(f"✅ {node.name}: sent {amount} BTC to {to_address} (txid {txid})")
        return txid

    async def mature_coinbase(self, node: BitcoinNode) -> int:
        """
        Minera o suficiente para que a saída mais próxima da maturidade
        fique gastável

        O candidato é a transação com mais confirmações entre todas as
        listadas; é uma heurística, não contabilidade exata de coinbase.

        Returns:
            Número de blocos minerados
        """
        transactions = await self.list_transactions(node)
        max_confs = max((tx.confirmations for tx in transactions), default=0)
        needed = self.needed_confirmations(max_confs)

        if needed > 0:
            await self.mine(needed, node)
            # podem ser ~100 blocos de uma vez; dá tempo aos outros nós
            await asyncio.sleep(self.config.maturity_grace_seconds)
        return needed

    def needed_confirmations(self, max_confs: int) -> int:
        return max(0, self.config.coinbase_maturity_delay - max_confs)

    def blocks_needed(self, height: int, desired_amount: float) -> int:
        """
        Número de blocos a minerar para gerar `desired_amount`

        O período de halving é 1-indexado (alturas do primeiro intervalo,
        inclusive 0, dão período 1). Mínimo de 1 bloco.
        """
        halving_period = max(1, math.ceil(height / self.config.halving_interval))
        current_reward = self.config.initial_block_reward / halving_period
        if desired_amount < current_reward:
            return 1
        return max(1, math.floor(desired_amount / current_reward))

    async def wait_until_online(
        self,
        node: BitcoinNode,
        interval: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Consulta o nó até getblockchaininfo responder ou estourar o prazo

        Raises:
            BtcdTimeoutError: Nó não respondeu a tempo
        """
        interval = self.config.online_check_interval if interval is None else interval
        timeout = self.config.online_timeout if timeout is None else timeout

        await wait_for(
            lambda: self.get_blockchain_info(node),
            interval=interval,
            timeout=timeout,
            description=f"btcd node {node.name}",
        )
        logger.info(f"✅ btcd node {node.name} is online")
