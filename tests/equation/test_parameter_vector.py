import pytest

from taylorsolve.equation import ParameterVector
from taylorsolve.errors import InvalidArgumentError, OutOfRangeError


def test_flat_indexing_matches_layout():
    x = ParameterVector([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], order=1)
    assert len(x) == 6
    assert x[0] == 1.0
    assert x[4] == 5.0
    assert list(x) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert x == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert x.dimension_count == 3


def test_typed_accessors():
    x = ParameterVector([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], order=2)
    assert x.dimension(1) == (4.0, 5.0, 6.0)
    assert x.derivative(1, 0) == 4.0
    assert x.derivative(0, 2) == 3.0


def test_accessor_bounds():
    x = ParameterVector([1.0, 2.0], order=1)
    with pytest.raises(OutOfRangeError):
        x.dimension(1)
    with pytest.raises(InvalidArgumentError):
        x.derivative(0, 2)


def test_length_must_match_stride():
    with pytest.raises(InvalidArgumentError):
        ParameterVector([1.0, 2.0, 3.0], order=1)
