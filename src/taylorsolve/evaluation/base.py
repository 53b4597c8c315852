"""Comparison of fixed-step solutions against an adaptive reference."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import numpy as np
import jax
import jax.numpy as jnp
from diffrax import diffeqsolve, ODETerm, SaveAt, PIDController, Tsit5, Dopri5, Dopri8

from ..config.schemas import EvaluationConfig
from ..dynamics.base import DynamicalSystem
from ..equation import ParameterVector


REFERENCE_SOLVERS = {
    "tsit5": Tsit5,
    "dopri5": Dopri5,
    "dopri8": Dopri8,
}


class BaseEvaluator(ABC):
    """Base class for evaluating simulated trajectories."""

    def __init__(self, config: Optional[EvaluationConfig] = None):
        self.config = config or EvaluationConfig()

    @abstractmethod
    def evaluate(
        self,
        system: DynamicalSystem,
        trajectory: np.ndarray,
        times: np.ndarray,
    ) -> Dict[str, Any]:
        """
        Evaluate a simulated trajectory.

        Parameters
        ----------
        system : DynamicalSystem
            The solved system
        trajectory : np.ndarray
            Recorded derivatives of shape (T, dimension_count, order + 1)
        times : np.ndarray
            Time points of shape (T,)

        Returns
        -------
        results : dict
            Evaluation results, with scalar metrics under ``"metrics"``
        """
        pass


class ReferenceEvaluator(BaseEvaluator):
    """
    Compare against a diffrax solution of the same governing equations.

    The reference state of each dimension is its lower derivatives
    ``[x, x', ..., x^(order-1)]``; the governing equation supplies the
    derivative of the last entry. Governing equations are plain Python
    callables, so they are evaluated on the host through
    ``jax.pure_callback``. The highest-order slots of the parameter vector
    are zero for the reference, which is exact for every equation that does
    not read its own output.
    """

    def evaluate(
        self,
        system: DynamicalSystem,
        trajectory: np.ndarray,
        times: np.ndarray,
    ) -> Dict[str, Any]:
        times = np.asarray(times)
        trajectory = np.asarray(trajectory)
        if len(times) < 2:
            return {"metrics": {}, "reference": None}

        reference = self.reference_solution(system, times)
        order = system.order

        metrics = {}
        for i, name in enumerate(system.variable_names):
            error = trajectory[:, i, 0] - reference[:, i * order]
            metrics[f"max_abs_error_{name}"] = float(np.max(np.abs(error)))
            metrics[f"rmse_{name}"] = float(np.sqrt(np.mean(error**2)))
        metrics["max_abs_error"] = max(
            metrics[f"max_abs_error_{name}"] for name in system.variable_names
        )

        return {"metrics": metrics, "reference": reference}

    def reference_solution(self, system: DynamicalSystem, times: np.ndarray) -> np.ndarray:
        """
        Solve the system adaptively, saved at ``times``.

        Returns:
            (T, dimension_count * order) array; column ``i * order + k`` holds
            derivative ``k`` of dimension ``i``
        """
        equations = system.equations
        order = system.order
        dimension_count = system.dimension_count
        callbacks = [equations.governing_equation(i) for i in range(dimension_count)]

        def host_derivatives(t, y):
            y = np.asarray(y).tolist()
            values = []
            for i in range(dimension_count):
                values.extend(y[i * order : (i + 1) * order])
                values.append(0.0)
            parameters = ParameterVector(values, order)

            dy = []
            for i, f in enumerate(callbacks):
                dy.extend(y[i * order + 1 : (i + 1) * order])
                dy.append(f(float(t), parameters))
            return np.asarray(dy, dtype=y_dtype)

        def vector_field(t, y, args):
            return jax.pure_callback(
                host_derivatives, jax.ShapeDtypeStruct(y.shape, y.dtype), t, y
            )

        y0 = jnp.asarray(
            [
                equations.data_for(i, k)[0]
                for i in range(dimension_count)
                for k in range(order)
            ]
        )
        y_dtype = np.dtype(y0.dtype)
        ts = jnp.asarray(times, dtype=y0.dtype)

        solver_name = self.config.reference_solver.lower()
        if solver_name not in REFERENCE_SOLVERS:
            raise ValueError(
                f"Unknown reference solver: {self.config.reference_solver}. "
                f"Available solvers: {list(REFERENCE_SOLVERS.keys())}"
            )
        solver = REFERENCE_SOLVERS[solver_name]()

        sol = diffeqsolve(
            ODETerm(vector_field),
            solver,
            t0=ts[0],
            t1=ts[-1],
            dt0=ts[1] - ts[0],
            y0=y0,
            saveat=SaveAt(ts=ts),
            stepsize_controller=PIDController(
                rtol=float(self.config.rtol), atol=float(self.config.atol)
            ),
            max_steps=int(self.config.max_steps),
        )
        return np.asarray(sol.ys)
