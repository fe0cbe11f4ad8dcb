"""
Snapshots derivados das respostas RPC do btcd

Nunca são cacheados: a mineração muda o estado da carteira a cada passo.
Os dicts recebidos já passaram pela normalização de chaves (camelCase).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BlockchainInfo:
    """Resultado de getblockchaininfo"""
    chain: str
    blocks: int
    headers: int = 0
    bestblockhash: str = ''
    difficulty: float = 0
    mediantime: int = 0
    pruned: bool = False

    @classmethod
    def from_result(cls, result: Dict[str, Any]) -> 'BlockchainInfo':
        return cls(
            chain=result.get('chain', ''),
            blocks=int(result['blocks']),
            headers=int(result.get('headers', 0)),
            bestblockhash=result.get('bestblockhash', ''),
            difficulty=result.get('difficulty', 0),
            mediantime=result.get('mediantime', 0),
            pruned=bool(result.get('pruned', False)),
        )


@dataclass(frozen=True)
class WalletInfo:
    """Resultado de getwalletinfo (btcwallet)"""
    balance: float
    walletversion: int = 0
    keypoololdest: int = 0
    keypoolsize: int = 0
    paytxfee: float = 0
    walletname: str = 'default'

    @classmethod
    def from_result(cls, result: Dict[str, Any]) -> 'WalletInfo':
        return cls(
            balance=result.get('balance', 0),
            walletversion=result.get('walletversion', 0),
            keypoololdest=result.get('keypoololdest', 0),
            keypoolsize=result.get('keypoolsize', 0),
            paytxfee=result.get('paytxfee', 0),
        )


@dataclass(frozen=True)
class WalletTransaction:
    """Entrada de listtransactions; só as confirmações importam para maturidade"""
    confirmations: int
    txid: Optional[str] = None
    category: Optional[str] = None
    amount: float = 0

    def __post_init__(self):
        if self.confirmations < 0:
            raise ValueError(f"Invalid confirmations: {self.confirmations}")

    @classmethod
    def from_result(cls, result: Dict[str, Any]) -> 'WalletTransaction':
        return cls(
            confirmations=int(result.get('confirmations', 0)),
            txid=result.get('txid'),
            category=result.get('category'),
            amount=result.get('amount', 0),
        )
