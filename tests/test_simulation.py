import numpy as np
import pytest

from taylorsolve.config.schemas import SimulationConfig, SystemConfig, TimeConfig
from taylorsolve.dynamics import create_system
from taylorsolve.simulation import TaylorSimulator, create_simulator


def lorenz_simulator(tf=0.2):
    system = create_system(SystemConfig(type="lorenz"))
    config = SimulationConfig(solver="taylor", time=TimeConfig(t0=0.0, dt=0.01, tf=tf))
    return create_simulator(system, config)


def test_create_simulator():
    simulator = lorenz_simulator()
    assert isinstance(simulator, TaylorSimulator)
    assert simulator.get_trajectory_info() == {"completed": False}


def test_unknown_simulator():
    system = create_system(SystemConfig(type="lorenz"))
    with pytest.raises(ValueError, match="Unknown simulator type"):
        create_simulator(system, SimulationConfig(solver="rk4"))


def test_run_returns_full_derivative_stack():
    simulator = lorenz_simulator()
    trajectory, times = simulator.run()

    assert times.shape == (21,)
    assert trajectory.shape == (21, 3, 2)
    np.testing.assert_allclose(trajectory[0, :, 0], [1.0, 1.0, 1.0])
    equations = simulator.system.equations
    np.testing.assert_array_equal(trajectory[:, 1, 1], equations.data_for(1, 1))

    info = simulator.get_trajectory_info()
    assert info["completed"]
    assert info["n_timesteps"] == 21
    assert info["time_span"][1] == pytest.approx(0.2)


def test_run_twice_gives_same_result():
    simulator = lorenz_simulator()
    first, _ = simulator.run()
    second, _ = simulator.run()
    np.testing.assert_array_equal(first, second)
