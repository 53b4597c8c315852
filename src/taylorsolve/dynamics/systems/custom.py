"""Systems whose governing equations are given as symbolic expressions."""

from typing import Any, Dict, List, Sequence, Tuple
import sympy as sp
from ..base import DynamicalSystem
from ...equation import GoverningEquation
from ...errors import InvalidArgumentError


def derivative_symbol_name(variable: str, k: int) -> str:
    """Symbol name of derivative ``k`` of ``variable``: x, dx, ddx, ..."""
    return "d" * k + variable


class CustomSystem(DynamicalSystem):
    """
    System defined entirely from configuration.

    Parameters:
        variables: list of variable names, one per dimension
        order: shared order of every variable
        equations: mapping variable -> expression for its highest derivative
        constants: mapping name -> value substituted into the expressions

    Expressions may use ``t`` and, for every variable ``v``, the symbols
    ``v``, ``dv``, ``ddv``, ... up to the governing order. Example (damped
    pendulum)::

        variables: [theta]
        order: 2
        equations: {theta: "-g / l * sin(theta) - c * dtheta"}
        constants: {g: 9.81, l: 1.0, c: 0.1}
    """

    def __init__(self):
        super().__init__()
        self.variable_names: Tuple[str, ...] = ()
        self.order = 1
        self.expressions: Dict[str, sp.Expr] = {}
        self.symbols: List[sp.Symbol] = []
        self.time_symbol = sp.Symbol("t")

    def configure(self, parameters: Dict[str, Any]) -> None:
        variables = parameters.get("variables")
        if not variables:
            raise InvalidArgumentError("Custom system requires a 'variables' list")
        self.variable_names = tuple(str(v) for v in variables)
        self.order = int(parameters.get("order", 1))

        names = [
            derivative_symbol_name(v, k)
            for v in self.variable_names
            for k in range(self.order + 1)
        ]
        if len(set(names)) != len(names) or "t" in names:
            raise InvalidArgumentError(
                f"Variable names {list(self.variable_names)} produce clashing symbols"
            )
        self.symbols = [sp.Symbol(name) for name in names]

        reserved = set(names) | {"t"}
        clashing = sorted(
            str(name) for name in parameters.get("constants", {}) if str(name) in reserved
        )
        if clashing:
            raise InvalidArgumentError(
                f"Constants {clashing} clash with the time or state symbols"
            )
        constants = {
            sp.Symbol(str(name)): value
            for name, value in parameters.get("constants", {}).items()
        }
        # Names such as beta or gamma would otherwise parse as sympy functions
        namespace = {s.name: s for s in constants}
        namespace.update({s.name: s for s in self.symbols})
        namespace["t"] = self.time_symbol

        equations = parameters.get("equations", {})
        missing = [v for v in self.variable_names if v not in equations]
        if missing:
            raise InvalidArgumentError(f"No equation given for variables {missing}")

        self.expressions = {}
        for name in self.variable_names:
            try:
                expr = sp.sympify(equations[name], locals=namespace)
            except (sp.SympifyError, SyntaxError, TypeError) as exc:
                raise InvalidArgumentError(
                    f"Could not parse equation for {name!r}: {equations[name]!r}"
                ) from exc
            expr = expr.subs(constants)
            unknown = expr.free_symbols - set(self.symbols) - {self.time_symbol}
            if unknown:
                raise InvalidArgumentError(
                    f"Equation for {name!r} uses undefined symbols "
                    f"{sorted(str(s) for s in unknown)}"
                )
            self.expressions[name] = expr

    def default_initial_conditions(self) -> Dict[str, List[float]]:
        return {name: [0.0] * self.order for name in self.variable_names}

    def governing_equations(self) -> Sequence[GoverningEquation]:
        return [self._lambdify(self.expressions[name]) for name in self.variable_names]

    def _lambdify(self, expr: sp.Expr) -> GoverningEquation:
        fn = sp.lambdify([self.time_symbol] + self.symbols, expr, modules="math")

        def governing_equation(t, x):
            return float(fn(t, *x))

        return governing_equation
