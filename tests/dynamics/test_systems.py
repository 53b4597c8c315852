import math

import numpy as np
import pytest

from taylorsolve.config.schemas import SystemConfig
from taylorsolve.dynamics import create_system, list_available_systems, register_system
from taylorsolve.dynamics.systems import (
    CustomSystem,
    HarmonicOscillator,
    LorenzAttractor,
    MassSpringDamper,
)
from taylorsolve.errors import InvalidArgumentError


def test_registry_contains_builtin_systems():
    available = list_available_systems()
    assert available["lorenz"] is LorenzAttractor
    assert available["mass_spring_damper"] is MassSpringDamper
    assert available["harmonic"] is HarmonicOscillator
    assert available["custom"] is CustomSystem


def test_unknown_system_type():
    with pytest.raises(ValueError, match="Unknown system type"):
        create_system(SystemConfig(type="double_pendulum"))


def test_register_system_requires_subclass():
    with pytest.raises(ValueError):
        register_system("not_a_system", dict)


def test_lorenz_defaults():
    system = create_system(SystemConfig(type="lorenz"))
    assert system.initialized
    assert system.variable_names == ("x", "y", "z")
    assert system.equations.dimension_count == 3
    assert system.equations.order == 1
    assert system.sigma == 10.0
    assert system.initial_conditions == {"x": [1.0], "y": [1.0], "z": [1.0]}


def test_lorenz_parameters_and_result():
    config = SystemConfig(
        type="lorenz",
        parameters={"sigma": 10.0, "rho": 28.0, "beta": 8.0 / 3.0},
        initial_conditions={"x": [1.0], "y": [1.0], "z": [1.0]},
    )
    system = create_system(config)
    system.solve(0.0, 0.01, 0.5)

    result = system.get_result()
    assert set(result) == {"t", "x", "y", "z"}
    assert len(result["t"]) == 51
    for name in "xyz":
        assert result[name].shape == result["t"].shape
        assert np.all(np.isfinite(result[name]))
    assert result["y"][1] == pytest.approx(1.26)


def test_unknown_initial_condition_variable():
    config = SystemConfig(type="lorenz", initial_conditions={"w": [1.0]})
    with pytest.raises(InvalidArgumentError):
        create_system(config)


def test_wrong_initial_condition_length():
    config = SystemConfig(type="harmonic", initial_conditions={"x": [1.0]})
    with pytest.raises(InvalidArgumentError):
        create_system(config)


def test_harmonic_follows_cosine():
    config = SystemConfig(type="harmonic", parameters={"omega": 2.0})
    system = create_system(config)
    system.solve(0.0, 0.001, 1.0)
    result = system.get_result()
    np.testing.assert_allclose(result["x"], np.cos(2.0 * result["t"]), atol=0.01)


def test_solve_again_replaces_previous_solution():
    system = create_system(SystemConfig(type="harmonic"))
    system.solve(0.0, 0.1, 1.0)
    first = system.get_result()
    system.solve(0.0, 0.1, 1.0)
    second = system.get_result()
    assert len(second["t"]) == len(first["t"]) == 11
    np.testing.assert_array_equal(first["x"], second["x"])


def test_solve_requires_initialization():
    with pytest.raises(RuntimeError):
        HarmonicOscillator().solve(0.0, 0.1, 1.0)


def test_undamped_mass_spring_matches_harmonic():
    config = SystemConfig(
        type="mass_spring_damper",
        parameters={"m": 1.0, "b": 0.0, "k": 1.0},
        initial_conditions={"x": [1.0, 0.0]},
    )
    system = create_system(config)
    system.solve(0.0, 0.01, 1.0)
    result = system.get_result()
    np.testing.assert_allclose(result["x"], np.cos(result["t"]), atol=0.02)
    np.testing.assert_array_equal(result["f"], np.zeros_like(result["t"]))


def test_mass_spring_damper_forcing():
    config = SystemConfig(
        type="mass_spring_damper",
        parameters={"forcing": {"amplitude": 2.0, "frequency": 3.0}},
    )
    system = create_system(config)
    # starting at rest, the first acceleration comes from the forcing only
    system.solve(0.25, 0.01, 0.5)
    assert system.equations.data_for(0, 2)[0] == pytest.approx(2.0 * math.sin(0.75))

    result = system.get_result()
    assert result["f"].shape == result["t"].shape
    np.testing.assert_allclose(result["f"], 2.0 * np.sin(3.0 * result["t"]))


def test_mass_spring_damper_custom_forcing():
    system = create_system(SystemConfig(type="mass_spring_damper"))
    with pytest.raises(InvalidArgumentError):
        system.set_forcing_function(1.0)
    system.set_forcing_function(lambda t: 1.0)
    system.solve(0.0, 0.1, 0.2)
    assert system.equations.data_for(0, 2)[0] == pytest.approx(1.0)


def test_mass_spring_damper_rejects_zero_mass():
    with pytest.raises(InvalidArgumentError):
        create_system(SystemConfig(type="mass_spring_damper", parameters={"m": 0.0}))


def custom_config(**parameters):
    return SystemConfig(type="custom", parameters=parameters)


def test_custom_exponential_decay():
    config = SystemConfig(
        type="custom",
        parameters={
            "variables": ["x"],
            "order": 1,
            "equations": {"x": "-k * x"},
            "constants": {"k": 1.0},
        },
        initial_conditions={"x": [1.0]},
    )
    system = create_system(config)
    system.solve(0.0, 0.001, 1.0)
    result = system.get_result()
    assert result["x"][-1] == pytest.approx(math.exp(-1.0), abs=5e-3)


def test_custom_constants_shadowing_sympy_functions():
    system = create_system(
        custom_config(
            variables=["x"],
            order=1,
            equations={"x": "-beta * x"},
            constants={"beta": 2.0},
        )
    )
    system.equations.set_initial_conditions(0, [1.0])
    system.solve(0.0, 0.1, 0.1)
    assert system.equations.data_for(0, 0)[1] == pytest.approx(0.8)


def test_custom_time_dependent_second_order():
    config = SystemConfig(
        type="custom",
        parameters={
            "variables": ["x", "y"],
            "order": 2,
            "equations": {"x": "cos(t)", "y": "-dx"},
        },
    )
    system = create_system(config)
    assert system.variable_names == ("x", "y")
    assert system.initial_conditions == {"x": [0.0, 0.0], "y": [0.0, 0.0]}
    system.solve(0.0, 0.001, 1.0)
    result = system.get_result()
    assert result["x"][-1] == pytest.approx(1.0 - math.cos(1.0), abs=5e-3)


@pytest.mark.parametrize(
    "parameters",
    [
        {"order": 1, "equations": {"x": "x"}},
        {"variables": ["x"], "order": 1, "equations": {}},
        {"variables": ["x"], "order": 1, "equations": {"x": "x * unknown"}},
        {"variables": ["x"], "order": 1, "equations": {"x": "x +* 2"}},
        {"variables": ["x", "dx"], "order": 1, "equations": {"x": "1", "dx": "1"}},
        {"variables": ["x"], "order": 1, "equations": {"x": "-x"}, "constants": {"x": 5.0}},
        {"variables": ["x"], "order": 2, "equations": {"x": "-x"}, "constants": {"dx": 1.0}},
        {"variables": ["x"], "order": 1, "equations": {"x": "-t"}, "constants": {"t": 0.0}},
    ],
)
def test_custom_invalid_definitions(parameters):
    with pytest.raises(InvalidArgumentError):
        create_system(SystemConfig(type="custom", parameters=parameters))


def test_state_info():
    system = create_system(SystemConfig(type="harmonic"))
    info = system.get_state_info()
    assert info["variables"] == ["x"]
    assert info["n_timesteps"] == 0
    system.solve(0.0, 0.5, 1.0)
    info = system.get_state_info()
    assert info["n_timesteps"] == 3
    assert "final_values" in info
    assert HarmonicOscillator().get_state_info() == {"initialized": False}


def test_print_info(capsys):
    system = create_system(SystemConfig(type="lorenz"))
    system.print_info()
    out = capsys.readouterr().out
    assert "LorenzAttractor" in out
    assert "Variables: x, y, z" in out
