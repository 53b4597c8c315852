"""Evaluation module for taylorsolve."""

from .base import BaseEvaluator, ReferenceEvaluator, REFERENCE_SOLVERS
from ..config.schemas import EvaluationConfig
from typing import Optional


def create_evaluator(config: Optional[EvaluationConfig] = None) -> BaseEvaluator:
    """
    Create an evaluator from configuration.

    Parameters
    ----------
    config : EvaluationConfig, optional
        Configuration for evaluation. If None, uses defaults.

    Returns
    -------
    evaluator : BaseEvaluator
        Configured evaluator
    """
    return ReferenceEvaluator(config)


__all__ = [
    "BaseEvaluator",
    "ReferenceEvaluator",
    "REFERENCE_SOLVERS",
    "create_evaluator",
]
