"""
Modelo de dados para nós da rede simulada
Define nós bitcoin (backend) e lightning, status compartilhado e validação
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from enum import Enum

from btcd_simnet.config import DEFAULT_RPC_HOST, DEFAULT_RPC_PASS, DEFAULT_RPC_PORT, DEFAULT_RPC_USER
from btcd_simnet.utils.logging import get_logger
from btcd_simnet.utils.validation import validate_node_config, validate_node_name

logger = get_logger('models.node')


class Status(Enum):
    """Status compartilhado por processos de nós e simulações"""
    STOPPED = "Stopped"
    STARTING = "Starting"
    STARTED = "Started"
    STOPPING = "Stopping"
    ERROR = "Error"

    def __str__(self):
        return self.value


class NodeImplementation(Enum):
    """Implementações de nós suportadas pela rede"""
    BTCD = "btcd"
    BITCOIND = "bitcoind"
    LND = "LND"
    CLIGHTNING = "c-lightning"
    ECLAIR = "eclair"
    LITD = "litd"

    def __str__(self):
        return self.value

    @property
    def is_bitcoin(self) -> bool:
        return self in (NodeImplementation.BTCD, NodeImplementation.BITCOIND)


@dataclass
class BitcoinNode:
    """
    Nó bitcoin (backend da rede)

    Attributes:
        name: Nome identificador do nó
        network_id: ID da rede à qual o nó pertence
        host: Host do endpoint RPC
        rpc_port: Porta RPC
        user: Usuário RPC
        password: Senha RPC
        peers: Endereços dos peers configurados
        implementation: Implementação do nó
        status: Estado atual do processo (controlado externamente)
    """
    name: str
    network_id: int
    host: str = DEFAULT_RPC_HOST
    rpc_port: int = DEFAULT_RPC_PORT
    user: str = DEFAULT_RPC_USER
    password: str = field(default=DEFAULT_RPC_PASS, repr=False)
    peers: List[str] = field(default_factory=list)
    implementation: NodeImplementation = NodeImplementation.BTCD
    status: Status = Status.STOPPED

    def __post_init__(self):
        """Validar configuração após inicialização"""
        self._validate()

    def _validate(self) -> None:
        logger.debug(f"Validating node config: {self.name}")

        if not isinstance(self.implementation, NodeImplementation):
            try:
                self.implementation = NodeImplementation(self.implementation)
            except ValueError:
                raise ValueError(f"Invalid implementation: {self.implementation}")

        if not self.implementation.is_bitcoin:
            raise ValueError(f"Expected a bitcoin implementation, got {self.implementation}")

        if not isinstance(self.status, Status):
            self.status = Status(self.status)

        valid, errors = validate_node_config(self.name, self.host, self.rpc_port, self.peers)
        if not valid:
            raise ValueError(f"Invalid node config: {errors}")

        self.peers = list(self.peers)

    @property
    def rpc_url(self) -> str:
        """Retorna endpoint RPC"""
        return f"http://{self.host}:{self.rpc_port}"

    def to_dict(self) -> Dict[str, Any]:
        """Converte nó para dicionário (sem credenciais)"""
        return {
            'name': self.name,
            'network_id': self.network_id,
            'host': self.host,
            'rpc_port': self.rpc_port,
            'user': self.user,
            'peers': list(self.peers),
            'implementation': str(self.implementation),
            'status': str(self.status),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BitcoinNode':
        """Cria nó a partir de dicionário"""
        return cls(
            name=data['name'],
            network_id=data['network_id'],
            host=data.get('host', DEFAULT_RPC_HOST),
            rpc_port=data.get('rpc_port', DEFAULT_RPC_PORT),
            user=data.get('user', DEFAULT_RPC_USER),
            password=data.get('password', DEFAULT_RPC_PASS),
            peers=data.get('peers', []),
            implementation=NodeImplementation(data.get('implementation', 'btcd')),
            status=Status(data.get('status', 'Stopped')),
        )


@dataclass
class LightningNode:
    """
    Nó lightning, origem ou destino de uma simulação
    """
    name: str
    network_id: int
    implementation: NodeImplementation = NodeImplementation.LND
    status: Status = Status.STOPPED

    def __post_init__(self):
        if not validate_node_name(self.name):
            raise ValueError(f"Invalid node name: {self.name}")

        if not isinstance(self.implementation, NodeImplementation):
            self.implementation = NodeImplementation(self.implementation)
        if self.implementation.is_bitcoin:
            raise ValueError(f"Expected a lightning implementation, got {self.implementation}")


def find_node(nodes: List[LightningNode], name: str) -> Optional[LightningNode]:
    """Procura nó pelo nome"""
    return next((n for n in nodes if n.name == name), None)
