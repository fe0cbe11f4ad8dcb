# tests/unit/test_simulation_controller.py

"""
Testes do ciclo de vida das simulações
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, Mock

from btcd_simnet.models import Simulation, Status
from btcd_simnet.simulation import (
    LoggingNotifier,
    Notifier,
    SimulationController,
    SimulationProcessManager,
    REMOVAL_FAILED,
    REMOVED,
    START_FAILED,
    STOP_FAILED,
)


@pytest.fixture
def process_manager():
    manager = Mock(spec=SimulationProcessManager)
    manager.start_simulation_process = AsyncMock()
    manager.stop_simulation_process = AsyncMock()
    manager.remove_simulation_process = AsyncMock()
    return manager


@pytest.fixture
def notifier():
    return Mock(spec=Notifier)


@pytest.fixture
def controller(process_manager, notifier):
    return SimulationController(process_manager, notifier)


@pytest.mark.unit
class TestRegistry:

    def test_add_starts_stopped(self, controller, simulation):
        simulation.status = Status.ERROR

        controller.add(simulation)

        assert controller.get(1) is simulation
        assert controller.status(1) == Status.STOPPED

    def test_one_simulation_per_network(self, controller, simulation, lightning_nodes):
        controller.add(simulation)
        _, bob, carol = lightning_nodes
        other = Simulation(network_id=1, source=bob, destination=carol, interval_secs=5, amount_msat=10)

        with pytest.raises(ValueError):
            controller.add(other)
        assert controller.get(1) is simulation

    def test_missing_network(self, controller):
        assert controller.get(99) is None
        assert controller.status(99) is None

    def test_default_notifier(self, process_manager):
        assert isinstance(SimulationController(process_manager).notifier, LoggingNotifier)


@pytest.mark.unit
@pytest.mark.asyncio
class TestStart:

    async def test_start_success(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)

        await controller.start(1)

        process_manager.start_simulation_process.assert_awaited_once_with(1)
        assert simulation.status == Status.STARTED
        notifier.notify.assert_not_called()

    async def test_status_is_starting_while_in_flight(self, controller, simulation, process_manager):
        controller.add(simulation)
        seen = []

        async def _start(network_id):
            seen.append(controller.status(network_id))

        process_manager.start_simulation_process.side_effect = _start

        await controller.start(1)

        assert seen == [Status.STARTING]

    async def test_start_failure(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)
        error = RuntimeError("docker container exited")
        process_manager.start_simulation_process.side_effect = error

        await controller.start(1)

        assert simulation.status == Status.ERROR
        notifier.notify.assert_called_once_with(START_FAILED, error)

    async def test_retry_after_error(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)
        process_manager.start_simulation_process.side_effect = [RuntimeError("boom"), None]

        await controller.start(1)
        await controller.start(1)

        assert simulation.status == Status.STARTED
        assert process_manager.start_simulation_process.await_count == 2

    @pytest.mark.parametrize("status", [Status.STARTED, Status.STARTING])
    async def test_start_ignored_when_running(self, controller, simulation, process_manager, status):
        controller.add(simulation)
        simulation.status = status

        await controller.start(1)

        process_manager.start_simulation_process.assert_not_awaited()
        assert simulation.status == status

    async def test_start_without_simulation(self, controller, process_manager, notifier):
        await controller.start(1)

        process_manager.start_simulation_process.assert_not_awaited()
        notifier.notify.assert_not_called()


@pytest.mark.unit
@pytest.mark.asyncio
class TestStop:

    async def test_stop_success(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)
        await controller.start(1)

        await controller.stop(1)

        process_manager.stop_simulation_process.assert_awaited_once_with(1)
        assert simulation.status == Status.STOPPED
        notifier.notify.assert_not_called()

    async def test_stop_failure(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)
        await controller.start(1)
        error = RuntimeError("process not found")
        process_manager.stop_simulation_process.side_effect = error

        await controller.stop(1)

        assert simulation.status == Status.ERROR
        notifier.notify.assert_called_once_with(STOP_FAILED, error)

    async def test_stop_from_error(self, controller, simulation, process_manager):
        controller.add(simulation)
        simulation.status = Status.ERROR

        await controller.stop(1)

        assert simulation.status == Status.STOPPED

    @pytest.mark.parametrize("status", [Status.STOPPED, Status.STOPPING])
    async def test_stop_ignored_when_not_running(self, controller, simulation, process_manager, status):
        controller.add(simulation)
        simulation.status = status

        await controller.stop(1)

        process_manager.stop_simulation_process.assert_not_awaited()

    async def test_stop_without_simulation(self, controller, process_manager, notifier):
        await controller.stop(1)

        process_manager.stop_simulation_process.assert_not_awaited()
        notifier.notify.assert_not_called()


@pytest.mark.unit
@pytest.mark.asyncio
class TestRemove:

    async def test_remove_success(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)

        await controller.remove(simulation)

        process_manager.remove_simulation_process.assert_awaited_once_with(1)
        assert controller.get(1) is None
        notifier.notify.assert_called_once_with(REMOVED)

    @pytest.mark.parametrize("status", list(Status))
    async def test_remove_from_any_status(self, controller, simulation, status):
        controller.add(simulation)
        simulation.status = status

        await controller.remove(simulation)

        assert controller.get(1) is None

    async def test_remove_failure_keeps_simulation(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)
        await controller.start(1)
        error = RuntimeError("permission denied")
        process_manager.remove_simulation_process.side_effect = error

        await controller.remove(simulation)

        assert controller.get(1) is simulation
        assert simulation.status == Status.STARTED
        notifier.notify.assert_called_once_with(REMOVAL_FAILED, error)

    async def test_remove_without_simulation(self, controller, simulation, process_manager, notifier):
        await controller.remove(simulation)

        process_manager.remove_simulation_process.assert_not_awaited()
        notifier.notify.assert_not_called()

    async def test_remove_stale_simulation(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)
        await controller.remove(simulation)
        process_manager.remove_simulation_process.reset_mock()
        notifier.reset_mock()

        await controller.remove(simulation)

        process_manager.remove_simulation_process.assert_not_awaited()
        notifier.notify.assert_not_called()

    async def test_remove_replaced_simulation(self, controller, simulation, process_manager):
        controller.add(simulation)
        await controller.remove(simulation)
        replacement = Simulation(
            network_id=1,
            source=simulation.source,
            destination=simulation.destination,
            interval_secs=simulation.interval_secs,
            amount_msat=simulation.amount_msat,
        )
        controller.add(replacement)
        process_manager.remove_simulation_process.reset_mock()

        await controller.remove(simulation)

        process_manager.remove_simulation_process.assert_not_awaited()
        assert controller.get(1) is replacement

    async def test_concurrent_removes(self, controller, simulation, process_manager, notifier):
        controller.add(simulation)

        await asyncio.gather(controller.remove(simulation), controller.remove(simulation))

        assert controller.get(1) is None
        assert all(c.args == (REMOVED,) for c in notifier.notify.call_args_list)


@pytest.mark.unit
def test_logging_notifier(caplog):
    notifier = LoggingNotifier()

    notifier.notify(REMOVED)
    notifier.notify(START_FAILED, RuntimeError("exit code 1"))

    assert "simulation removed" in caplog.text
    assert "start failed: exit code 1" in caplog.text
