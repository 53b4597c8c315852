"""Command line interface for taylorsolve."""

from .main import app, main, run, systems

__all__ = ["app", "main", "run", "systems"]
