# btcd_simnet/simulation/interfaces.py

"""
Colaboradores externos do controlador de simulações
"""

from abc import ABC, abstractmethod
from typing import Optional

from btcd_simnet.utils.logging import get_logger

logger = get_logger("simulation.notify")


class SimulationProcessManager(ABC):
    """Gerencia o processo que dispara os pagamentos (opaco para o core)"""

    @abstractmethod
    async def start_simulation_process(self, network_id: int) -> None: ...

    @abstractmethod
    async def stop_simulation_process(self, network_id: int) -> None: ...

    @abstractmethod
    async def remove_simulation_process(self, network_id: int) -> None: ...


class Notifier(ABC):
    """Destino das notificações mostradas ao usuário"""

    @abstractmethod
    def notify(self, message: str, error: Optional[BaseException] = None) -> None: ...


class LoggingNotifier(Notifier):
    """Notifier padrão: escreve no logger do pacote"""

    def notify(self, message: str, error: Optional[BaseException] = None) -> None:
        if error is None:
            logger.info(f"✅ {message}")
        else:
            logger.error(f"❌ {message}: {error}")
