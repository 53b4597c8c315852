import pytest

from taylorsolve.equation import DimensionState
from taylorsolve.errors import InvalidArgumentError


@pytest.mark.parametrize("order", [0, -1, 1.5, True, "2"])
def test_order_must_be_positive_integer(order):
    with pytest.raises(InvalidArgumentError):
        DimensionState(order)


def test_new_dimension_is_empty():
    dim = DimensionState(2)
    assert dim.current_step_index() == 0
    assert dim.latest_derivative_vector() == [None, None, None]
    for k in range(3):
        assert dim.nth_derivative(k) == ()


@pytest.mark.parametrize("values", [[1.0], [1.0, 2.0, 3.0], [], "ab", 1.0, [1.0, "x"], [1.0, None]])
def test_bad_initial_conditions_do_not_mutate(values):
    dim = DimensionState(2)
    with pytest.raises(InvalidArgumentError):
        dim.set_initial_conditions(values)
    assert dim.nth_derivative(0) == ()
    assert dim.nth_derivative(1) == ()


def test_initial_conditions_fill_lower_orders():
    dim = DimensionState(2)
    dim.set_initial_conditions([1.0, 2.0])
    assert dim.nth_derivative(0) == (1.0,)
    assert dim.nth_derivative(1) == (2.0,)
    assert dim.nth_derivative(2) == ()
    assert dim.has_initial_conditions()


def test_step_is_truncated_taylor_expansion():
    dim = DimensionState(2)
    dim.set_initial_conditions([1.0, 2.0])
    dim.set_highest_order_derivative(3.0)
    dim.step(0.1)

    # x1 = x0 + dt*v0 + dt^2/2*a0, v1 = v0 + dt*a0
    assert dim.nth_derivative(0)[1] == pytest.approx(1.0 + 0.2 + 0.015)
    assert dim.nth_derivative(1)[1] == pytest.approx(2.3)
    # the latest complete step is still the first until the highest order is set
    assert dim.latest_derivative_vector() == [1.0, 2.0, 3.0]

    dim.set_highest_order_derivative(4.0)
    assert dim.current_step_index() == 2
    assert dim.latest_derivative_vector() == pytest.approx([1.215, 2.3, 4.0])


def test_third_order_step_is_exact_for_cubic():
    # x''' = 6 from rest gives x = t^3, x' = 3t^2, x'' = 6t
    dim = DimensionState(3)
    dim.set_initial_conditions([0.0, 0.0, 0.0])
    dim.set_highest_order_derivative(6.0)
    dim.step(1.0)
    assert dim.nth_derivative(0)[1] == pytest.approx(1.0)
    assert dim.nth_derivative(1)[1] == pytest.approx(3.0)
    assert dim.nth_derivative(2)[1] == pytest.approx(6.0)


def test_step_requires_previous_step():
    dim = DimensionState(1)
    dim.set_initial_conditions([1.0])
    with pytest.raises(InvalidArgumentError):
        dim.step(0.1)


@pytest.mark.parametrize("n", [-1, 3, 1.0])
def test_nth_derivative_out_of_range(n):
    dim = DimensionState(2)
    with pytest.raises(InvalidArgumentError):
        dim.nth_derivative(n)


def test_nth_derivative_is_read_only_copy():
    dim = DimensionState(1)
    dim.set_initial_conditions([1.0])
    data = dim.nth_derivative(0)
    assert isinstance(data, tuple)
    dim.set_highest_order_derivative(1.0)
    dim.step(1.0)
    assert data == (1.0,)
    assert dim.nth_derivative(0) == (1.0, 2.0)


def test_reset_clears_history():
    dim = DimensionState(1)
    dim.set_initial_conditions([1.0])
    dim.set_highest_order_derivative(2.0)
    dim.reset()
    assert dim.current_step_index() == 0
    assert not dim.has_initial_conditions()
    assert dim.order == 1


def test_initial_conditions_locked_once_stepped():
    dim = DimensionState(1)
    dim.set_initial_conditions([1.0])
    dim.set_initial_conditions([2.0])
    assert dim.nth_derivative(0) == (2.0,)

    dim.set_highest_order_derivative(1.0)
    with pytest.raises(InvalidArgumentError, match="reset"):
        dim.set_initial_conditions([100.0])
    assert dim.nth_derivative(0) == (2.0,)
