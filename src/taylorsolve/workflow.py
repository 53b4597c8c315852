"""High-level workflow orchestration for taylorsolve."""

from pathlib import Path
from typing import Any, Dict, List, Optional
import time

import matplotlib.pyplot as plt
import yaml
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import Config, load_config
from .dynamics import create_system
from .simulation import create_simulator
from .visualization import create_visualizer
from .evaluation import create_evaluator

console = Console()


def run_full_pipeline(
    config: Config,
    output_dir: Optional[Path] = None,
    verbose: bool = True,
    save_intermediate: bool = True,
) -> Dict[str, Any]:
    """
    Build, solve, plot and evaluate the configured system.

    Args:
        config: Complete configuration object
        output_dir: Directory to save outputs (defaults to config.output_dir)
        verbose: Whether to print progress information
        save_intermediate: Whether to save figures and the pipeline summary

    Returns:
        Dictionary containing all results from the pipeline
    """
    if output_dir is None:
        output_dir = config.output_dir
    output_dir = Path(output_dir)
    if save_intermediate:
        output_dir.mkdir(parents=True, exist_ok=True)

    results = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        disable=not verbose,
    ) as progress:

        # Step 1: Create system
        task1 = progress.add_task("Creating system...", total=None)
        system = create_system(config.system)
        progress.update(task1, description="System created")

        if verbose:
            console.print(
                f"[green]✓[/green] Created {config.system.type} system: "
                f"{system.dimension_count} dimension(s) of order {system.order}"
            )

        # Step 2: Solve
        task2 = progress.add_task("Running simulation...", total=None)
        simulator = create_simulator(
            system, config.simulation, console=console if verbose else None
        )
        trajectory, times = simulator.run()
        progress.update(task2, description="Simulation completed")

        if verbose:
            console.print(
                f"[green]✓[/green] Simulation completed: {len(times)} timesteps "
                f"from t={times[0]:.4g} to t={times[-1]:.4g}"
            )

        results["trajectory"] = trajectory
        results["times"] = times
        results["system"] = system

        # Step 3: Visualization (optional)
        if config.visualization is not None:
            task3 = progress.add_task("Creating visualizations...", total=None)
            visualizer = create_visualizer(config.visualization)

            save_path = None
            if save_intermediate:
                name = config.visualization.save_path or f"{config.system.type}.png"
                save_path = output_dir / Path(name).name
                if not save_path.suffix:
                    save_path = save_path.with_suffix(".png")

            figures = visualizer.visualize(
                times,
                trajectory,
                labels=system.variable_names,
                save_path=save_path,
                **dict(config.visualization.parameters),
            )
            for fig in figures.values():
                plt.close(fig)
            progress.update(task3, description="Visualizations created")

            results["visualizations"] = {"save_path": save_path}

            if verbose:
                console.print(
                    f"[green]✓[/green] Visualizations created using {config.visualization.backend}"
                )

        # Step 4: Comparison against a reference solution (optional)
        if config.evaluation is not None:
            task4 = progress.add_task("Evaluating against reference...", total=None)
            evaluator = create_evaluator(config.evaluation)
            eval_results = evaluator.evaluate(system, trajectory, times)
            progress.update(task4, description="Evaluation completed")

            results["evaluation"] = eval_results

            if verbose:
                console.print(
                    f"[green]✓[/green] Evaluation against {config.evaluation.reference_solver} completed"
                )
                for metric, value in eval_results.get("metrics", {}).items():
                    console.print(f"  {metric}: {value:.6e}")

    if save_intermediate:
        summary_path = output_dir / "pipeline_summary.yaml"
        save_pipeline_summary(results, summary_path, config)
        results["summary_path"] = summary_path
        if verbose:
            console.print(f"[blue]💾[/blue] Pipeline summary saved to {summary_path}")

    results["output_dir"] = output_dir
    return results


def run_pipeline_from_config_file(
    config_path: str,
    output_dir: Optional[str] = None,
    overrides: Optional[List[str]] = None,
    **kwargs,
) -> Dict[str, Any]:
    """
    Run pipeline from a configuration file.

    Args:
        config_path: Path to YAML configuration file
        output_dir: Output directory (optional)
        overrides: Dotlist overrides such as ``simulation.time.dt=0.001``
        **kwargs: Additional arguments passed to run_full_pipeline

    Returns:
        Pipeline results
    """
    config = load_config(config_path).with_overrides(overrides or [])

    if output_dir is not None:
        config.output_dir = Path(output_dir)

    return run_full_pipeline(config, **kwargs)


def save_pipeline_summary(
    results: Dict[str, Any], save_path: Path, config: Optional[Config] = None
) -> None:
    """Save a summary of pipeline results."""
    summary = {
        "completed_steps": [
            key for key in ("trajectory", "visualizations", "evaluation") if key in results
        ],
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
    }

    if config is not None:
        summary["config"] = config.to_dict()

    if "trajectory" in results:
        times = results["times"]
        system = results["system"]
        summary["trajectory"] = {
            "shape": list(results["trajectory"].shape),
            "t0": float(times[0]),
            "tf": float(times[-1]),
            "n_timesteps": len(times),
            "final_values": {
                name: float(results["trajectory"][-1, i, 0])
                for i, name in enumerate(system.variable_names)
            },
        }

    evaluation = results.get("evaluation")
    if evaluation is not None and (config is None or config.evaluation.save_results):
        summary["evaluation"] = evaluation.get("metrics", {})

    with open(save_path, "w") as f:
        yaml.dump(summary, f, default_flow_style=False, indent=2)
