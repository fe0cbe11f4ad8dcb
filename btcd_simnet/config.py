# btcd_simnet/config.py

"""
Configuração do btcd-simnet

Constantes de protocolo (maturidade de coinbase, halving, recompensa) e
parâmetros operacionais ficam num objeto imutável passado ao orquestrador.
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict

DEFAULT_RPC_USER = os.getenv("BTCD_SIMNET_RPC_USER", "polaruser")
DEFAULT_RPC_PASS = os.getenv("BTCD_SIMNET_RPC_PASS", "polarpass")
DEFAULT_RPC_HOST = os.getenv("BTCD_SIMNET_RPC_HOST", "127.0.0.1")
DEFAULT_RPC_PORT = int(os.getenv("BTCD_SIMNET_RPC_PORT", "18334"))

ENV_PREFIX = "BTCD_SIMNET_"


@dataclass(frozen=True)
class FundingConfig:
    """
    Parâmetros do orquestrador de fundos

    Attributes:
        coinbase_maturity_delay: Confirmações até um coinbase ser gastável
        halving_interval: Blocos entre cada halving da recompensa
        initial_block_reward: Recompensa do primeiro período (BTC)
        wallet_unlock_seconds: Janela de desbloqueio da carteira para o envio
        maturity_grace_seconds: Espera após minerar para maturar coinbase
        wallet_passphrase: Senha da carteira btcwallet
        online_check_interval: Intervalo padrão do polling de prontidão
        online_timeout: Prazo padrão do polling de prontidão
    """
    coinbase_maturity_delay: int = 100
    halving_interval: int = 150
    initial_block_reward: float = 50
    wallet_unlock_seconds: int = 120
    maturity_grace_seconds: float = 2
    wallet_passphrase: str = DEFAULT_RPC_PASS
    online_check_interval: float = 10
    online_timeout: float = 5 * 60

    def __post_init__(self):
        if self.coinbase_maturity_delay < 0:
            raise ValueError(f"Invalid coinbase_maturity_delay: {self.coinbase_maturity_delay}")
        if self.halving_interval <= 0:
            raise ValueError(f"Invalid halving_interval: {self.halving_interval}")
        if self.initial_block_reward <= 0:
            raise ValueError(f"Invalid initial_block_reward: {self.initial_block_reward}")
        if self.wallet_unlock_seconds <= 0:
            raise ValueError(f"Invalid wallet_unlock_seconds: {self.wallet_unlock_seconds}")
        if self.maturity_grace_seconds < 0:
            raise ValueError(f"Invalid maturity_grace_seconds: {self.maturity_grace_seconds}")

    def to_dict(self) -> Dict[str, Any]:
        """Converte config para dicionário (sem a senha)"""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['wallet_passphrase'] = '***'
        return data

    @classmethod
    def from_env(cls, environ=None) -> 'FundingConfig':
        """
        Cria config a partir de variáveis de ambiente BTCD_SIMNET_*

        Ex: BTCD_SIMNET_HALVING_INTERVAL=210000
        """
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for f in fields(cls):
            raw = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is None:
                continue
            # int, float ou str, conforme a anotação do campo
            overrides[f.name] = f.type(raw)
        return cls(**overrides)
