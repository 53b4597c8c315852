import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path
from .base import BaseVisualizer


def to_numpy(arr):
    if arr is not None and not isinstance(arr, np.ndarray):
        return np.asarray(arr)
    return arr


def derivative_label(name, k):
    """x, x', x'', x^(3), ..."""
    if k == 0:
        return name
    if k <= 2:
        return name + "'" * k
    return f"{name}^({k})"


class MatplotlibVisualizer(BaseVisualizer):
    """
    Time-series and phase-portrait plots of a solved system.
    """

    def visualize(
        self,
        times,
        trajectory,
        labels=None,
        save_path=None,
        orders=None,
        phase_portrait=None,
        **kwargs,
    ):
        """
        Plot recorded derivatives against time.
        Args:
            times: Array of shape (T,)
            trajectory: Array of shape (T, D, order + 1)
            labels: Names of the D dimensions
            save_path: Where to save the figure (the phase portrait goes next
                to it with a ``_phase`` suffix)
            orders: Derivative orders to plot, one subplot each
            phase_portrait: Also plot the order-0 values against each other
        Returns:
            dict with the created figures
        """
        times = to_numpy(times)
        trajectory = to_numpy(trajectory)
        if trajectory.ndim != 3:
            raise ValueError(
                f"trajectory must be (T, D, order + 1), got shape {trajectory.shape}"
            )
        T, D, n_orders = trajectory.shape
        if len(times) != T:
            raise ValueError(f"Got {len(times)} times for {T} trajectory steps")

        labels = list(labels) if labels is not None else [f"x{i}" for i in range(D)]
        if orders is None:
            orders = getattr(self.config, "orders", None) or [0]
        if phase_portrait is None:
            phase_portrait = getattr(self.config, "phase_portrait", False)
        for k in orders:
            if not 0 <= k < n_orders:
                raise ValueError(f"Derivative order {k} not in [0, {n_orders - 1}]")

        figsize = kwargs.get("figsize", (8, 3 * len(orders)))
        fig, axes = plt.subplots(len(orders), 1, figsize=figsize, sharex=True, squeeze=False)
        for ax, k in zip(axes[:, 0], orders):
            for i in range(D):
                ax.plot(times, trajectory[:, i, k], label=derivative_label(labels[i], k))
            ax.set_ylabel(f"order {k}")
            ax.grid(True, alpha=0.3)
            ax.legend(loc="upper right")
        axes[-1, 0].set_xlabel("t")
        fig.tight_layout()

        figures = {"time_series": fig}
        if phase_portrait and (D >= 2 or n_orders >= 2):
            figures["phase_portrait"] = self._phase_portrait(trajectory, labels)

        if save_path is not None:
            save_path = Path(save_path)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=kwargs.get("dpi", 100))
            if "phase_portrait" in figures:
                phase_path = save_path.with_name(save_path.stem + "_phase" + save_path.suffix)
                figures["phase_portrait"].savefig(phase_path, dpi=kwargs.get("dpi", 100))
            print(f"Figure saved to {save_path}")

        return figures

    def _phase_portrait(self, trajectory, labels):
        D = trajectory.shape[1]
        fig = plt.figure(figsize=(6, 6))
        if D == 1:
            # position against velocity
            ax = fig.add_subplot(111)
            ax.plot(trajectory[:, 0, 0], trajectory[:, 0, 1], lw=0.8)
            ax.set_xlabel(labels[0])
            ax.set_ylabel(derivative_label(labels[0], 1))
            return fig
        if D >= 3:
            ax = fig.add_subplot(111, projection="3d")
            ax.plot(trajectory[:, 0, 0], trajectory[:, 1, 0], trajectory[:, 2, 0], lw=0.6)
            ax.set_zlabel(labels[2])
        else:
            ax = fig.add_subplot(111)
            ax.plot(trajectory[:, 0, 0], trajectory[:, 1, 0], lw=0.8)
        ax.set_xlabel(labels[0])
        ax.set_ylabel(labels[1])
        return fig
