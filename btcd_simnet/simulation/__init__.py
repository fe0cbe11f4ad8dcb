# btcd_simnet/simulation/__init__.py

"""
Controle de simulações de pagamento
"""

from btcd_simnet.simulation.controller import (
    PreconditionNotMet,
    SimulationController,
    START_FAILED,
    STOP_FAILED,
    REMOVAL_FAILED,
    REMOVED,
)
from btcd_simnet.simulation.interfaces import LoggingNotifier, Notifier, SimulationProcessManager

__all__ = [
    "LoggingNotifier",
    "Notifier",
    "PreconditionNotMet",
    "SimulationController",
    "SimulationProcessManager",
    "START_FAILED",
    "STOP_FAILED",
    "REMOVAL_FAILED",
    "REMOVED",
]
