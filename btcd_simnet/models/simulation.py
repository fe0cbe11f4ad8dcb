"""
Modelo de simulação de pagamentos
Uma simulação por rede, entre dois nós lightning distintos
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from btcd_simnet.models.node import LightningNode, Status, find_node
from btcd_simnet.utils.logging import get_logger

logger = get_logger('models.simulation')


@dataclass(eq=False)
class Simulation:
    """
    Simulação de pagamentos automáticos

    Comparação é por identidade: dois objetos com os mesmos campos não são
    a mesma simulação.

    Attributes:
        network_id: Rede dona da simulação
        source: Nó que envia os pagamentos
        destination: Nó que recebe os pagamentos
        interval_secs: Intervalo entre pagamentos
        amount_msat: Valor de cada pagamento em msat
        status: Estado atual
    """
    network_id: int
    source: LightningNode
    destination: LightningNode
    interval_secs: int
    amount_msat: int
    status: Status = field(default=Status.STOPPED)

    def __post_init__(self):
        if self.source.name == self.destination.name:
            raise ValueError(f"Source and destination must differ (both are {self.source.name})")
        if self.interval_secs <= 0:
            raise ValueError(f"Invalid interval_secs: {self.interval_secs}")
        if self.amount_msat <= 0:
            raise ValueError(f"Invalid amount_msat: {self.amount_msat}")
        if not isinstance(self.status, Status):
            self.status = Status(self.status)

    def set_status(self, status: Status) -> None:
        """Atualiza status da simulação"""
        old_status = self.status
        self.status = status
        logger.info(f"Simulation (network {self.network_id}) status: {old_status} → {status}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'network_id': self.network_id,
            'source': self.source.name,
            'destination': self.destination.name,
            'interval_secs': self.interval_secs,
            'amount_msat': self.amount_msat,
            'status': str(self.status),
        }


def create_simulation(
    network_id: int,
    nodes: List[LightningNode],
    source: str,
    destination: str,
    interval_secs: int,
    amount_msat: int,
) -> Simulation:
    """
    Cria simulação a partir dos nomes dos nós da rede

    Raises:
        ValueError: Origem/destino não encontrados ou parâmetros inválidos
    """
    source_node = find_node(nodes, source)
    destination_node = find_node(nodes, destination)
    if source_node is None or destination_node is None:
        raise ValueError(f"Source or destination node not found: {source} -> {destination}")

    return Simulation(
        network_id=network_id,
        source=source_node,
        destination=destination_node,
        interval_secs=interval_secs,
        amount_msat=amount_msat,
        status=Status.STOPPED,
    )
