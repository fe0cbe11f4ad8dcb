#!/usr/bin/env python3
"""
CLI para operar um nó btcd da rede simulada
"""

import argparse
import asyncio
import logging
import sys

from btcd_simnet.bitcoin import get_bitcoin_service
from btcd_simnet.client import AsyncBtcdRpcClient, BtcdClientError
from btcd_simnet.config import DEFAULT_RPC_HOST, DEFAULT_RPC_PASS, DEFAULT_RPC_PORT, DEFAULT_RPC_USER, FundingConfig
from btcd_simnet.models import BitcoinNode
from btcd_simnet.utils import setup_logging


def build_node(args) -> BitcoinNode:
    return BitcoinNode(
        name=args.name,
        network_id=args.network_id,
        host=args.host,
        rpc_port=args.port,
        user=args.user,
        password=args.password,
        peers=args.peer or [],
    )


async def cmd_online(args, service, node):
    """Espera o nó responder"""
    await service.wait_until_online(node, interval=args.interval, timeout=args.timeout)
    print(f"✅ {node.name} online")


async def cmd_peers(args, service, node):
    """Conecta peers"""
    connected = await service.connect_peers(node)
    print(f"🔗 {len(connected)}/{len(node.peers)} peers conectados")
    for peer in connected:
        print(f"  - {peer}")


async def cmd_fund(args, service, node):
    """Garante saldo e envia"""
    txid = await service.ensure_funds(node, args.to, args.amount)
    print(txid)


COMMANDS = {
    'online': cmd_online,
    'peers': cmd_peers,
    'fund': cmd_fund,
}


async def run(args) -> None:
    node = build_node(args)
    async with AsyncBtcdRpcClient(timeout=args.rpc_timeout) as client:
        service = get_bitcoin_service(node, client, FundingConfig.from_env())
        await COMMANDS[args.command](args, service, node)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Operações de funding para nós btcd",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('--name', default='backend1', help='Nome do nó')
    parser.add_argument('--network-id', type=int, default=1, help='ID da rede')
    parser.add_argument('--host', default=DEFAULT_RPC_HOST, help='Host RPC')
    parser.add_argument('--port', type=int, default=DEFAULT_RPC_PORT, help='Porta RPC')
    parser.add_argument('--user', default=DEFAULT_RPC_USER, help='Usuário RPC')
    parser.add_argument('--password', default=DEFAULT_RPC_PASS, help='Senha RPC')
    parser.add_argument('--peer', action='append', help='Endereço de peer (repetível)')
    parser.add_argument('--rpc-timeout', type=int, default=30, help='Timeout por requisição (s)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log em nível DEBUG')

    subparsers = parser.add_subparsers(dest='command', help='Comandos')

    # online
    online_parser = subparsers.add_parser('online', help='Espera o nó ficar online')
    online_parser.add_argument('--interval', type=float, default=None, help='Intervalo entre tentativas (s)')
    online_parser.add_argument('--timeout', type=float, default=None, help='Prazo total (s)')

    # peers
    subparsers.add_parser('peers', help='Conecta o nó aos peers')

    # fund
    fund_parser = subparsers.add_parser('fund', help='Minera se preciso e envia fundos')
    fund_parser.add_argument('--to', required=True, help='Endereço de destino')
    fund_parser.add_argument('--amount', type=float, required=True, help='Valor em BTC')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        asyncio.run(run(args))
    except (BtcdClientError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
