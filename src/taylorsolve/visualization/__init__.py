"""Visualization module for taylorsolve."""

from .matplotlib_visualization import MatplotlibVisualizer


def create_visualizer(config):
    """Create a visualizer from configuration (expects config.backend)."""
    backend = getattr(config, "backend", None)
    if backend is None:
        raise ValueError("Visualization config must specify 'backend'.")
    backend = backend.lower()
    if backend == "matplotlib":
        return MatplotlibVisualizer(config)
    else:
        raise ValueError(f"Unknown visualization backend: {backend}")


__all__ = [
    "MatplotlibVisualizer",
    "create_visualizer",
]
