# btcd_simnet/simulation/controller.py

"""
Ciclo de vida das simulações de pagamento

Mantém no máximo uma simulação por rede, num mapa network_id → Simulation.
Transições:

    Stopped → Starting → Started → Stopping → Stopped
    Starting/Stopping → Error (falha)      Error → Starting (retry)

remove() é ortogonal ao status. Operações sobre uma simulação que não
existe (ou que já foi substituída) são no-ops silenciosos.
"""

from typing import Dict, Optional

from btcd_simnet.models.node import Status
from btcd_simnet.models.simulation import Simulation
from btcd_simnet.simulation.interfaces import LoggingNotifier, Notifier, SimulationProcessManager
from btcd_simnet.utils.logging import get_logger

logger = get_logger("simulation.controller")

START_FAILED = "start failed"
STOP_FAILED = "stop failed"
REMOVAL_FAILED = "removal failed"
REMOVED = "simulation removed"


class PreconditionNotMet(Exception):
    """Operação sem simulação correspondente; nunca chega ao usuário"""

    pass


class SimulationController:
    """
    Controlador das simulações de uma coleção de redes

    Args:
        process_manager: Inicia/para/remove o processo da simulação
        notifier: Recebe as mensagens de falha e sucesso
    """

    def __init__(self, process_manager: SimulationProcessManager, notifier: Optional[Notifier] = None):
        self.process_manager = process_manager
        self.notifier = notifier or LoggingNotifier()
        self._simulations: Dict[int, Simulation] = {}

    # ---------- Registro ----------

    def add(self, simulation: Simulation) -> Simulation:
        """
        Registra a simulação da rede

        Raises:
            ValueError: A rede já tem uma simulação
        """
        if simulation.network_id in self._simulations:
            raise ValueError(f"Network {simulation.network_id} already has a simulation")

        simulation.status = Status.STOPPED
        self._simulations[simulation.network_id] = simulation
        logger.info(
            f"Simulation added to network {simulation.network_id}: "
            f"{simulation.source.name} → {simulation.destination.name} "
            f"({simulation.amount_msat} msat every {simulation.interval_secs}s)"
        )
        return simulation

    def get(self, network_id: int) -> Optional[Simulation]:
        return self._simulations.get(network_id)

    def status(self, network_id: int) -> Optional[Status]:
        simulation = self.get(network_id)
        return simulation.status if simulation else None

    def _require(self, network_id: int) -> Simulation:
        simulation = self.get(network_id)
        if simulation is None:
            raise PreconditionNotMet(f"No simulation for network {network_id}")
        return simulation

    # ---------- Lifecycle ----------

    async def start(self, network_id: int) -> None:
        """Inicia a simulação da rede (também usado para retry após Error)"""
        try:
            simulation = self._require(network_id)
        except PreconditionNotMet as e:
            logger.debug(f"Ignoring start: {e}")
            return

        if simulation.status in (Status.STARTED, Status.STARTING):
            logger.debug(f"Ignoring start: network {network_id} simulation is {simulation.status}")
            return

        simulation.set_status(Status.STARTING)
        try:
            await self.process_manager.start_simulation_process(network_id)
        except Exception as e:
            simulation.set_status(Status.ERROR)
            self.notifier.notify(START_FAILED, e)
            return
        simulation.set_status(Status.STARTED)

    async def stop(self, network_id: int) -> None:
        """Para a simulação da rede"""
        try:
            simulation = self._require(network_id)
        except PreconditionNotMet as e:
            logger.debug(f"Ignoring stop: {e}")
            return

        if simulation.status in (Status.STOPPED, Status.STOPPING):
            logger.debug(f"Ignoring stop: network {network_id} simulation is {simulation.status}")
            return

        simulation.set_status(Status.STOPPING)
        try:
            await self.process_manager.stop_simulation_process(network_id)
        except Exception as e:
            simulation.set_status(Status.ERROR)
            self.notifier.notify(STOP_FAILED, e)
            return
        simulation.set_status(Status.STOPPED)

    async def remove(self, simulation: Simulation) -> None:
        """
        Remove a simulação, desde que ainda seja a associada à rede

        Em caso de falha a simulação continua registrada com o mesmo status.
        """
        network_id = simulation.network_id
        try:
            if self._require(network_id) is not simulation:
                raise PreconditionNotMet(f"Simulation for network {network_id} was replaced")
        except PreconditionNotMet as e:
            logger.debug(f"Ignoring remove: {e}")
            return

        try:
            await self.process_manager.remove_simulation_process(network_id)
        except Exception as e:
            self.notifier.notify(REMOVAL_FAILED, e)
            return

        # pode ter sido removida por outra chamada durante o await
        if self._simulations.get(network_id) is simulation:
            del self._simulations[network_id]
        logger.info(f"Simulation removed from network {network_id}")
        self.notifier.notify(REMOVED)
