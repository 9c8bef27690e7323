"""Visualization utilities for dosing line analysis.

This module provides functions to visualize how line throughput affects dwell
time and valve count, and how a valve's dispensed volume follows its trigger
time.
"""

from dataclasses import replace
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from dosing_systems.models import LineConfig, ValveConfig
from dosing_systems.planner import DosingPlanner
from dosing_systems.quantities import Time, Volume


def plot_uph_sweep(
    line: LineConfig,
    valve: ValveConfig,
    target_volume: Volume,
    uph_values: Sequence[float],
    planner: Optional[DosingPlanner] = None,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot how a line behaves across a range of throughputs.

    Creates a multi-panel visualization showing:
    - Line speed against UPH
    - Dwell time and valve trigger time against UPH
    - Required valve count against UPH

    The line geometry is kept fixed; only ``uph`` is varied.

    Args:
        line: Line configuration providing pitch and opening
        valve: Valve configuration
        target_volume: Volume to dose into each container
        uph_values: Throughputs to evaluate
        planner: Planner to use (default: DosingPlanner())
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Raises:
        ValueError: If uph_values is empty, or a throughput leaves no time to
            dispense (see DosingPlanner.process)
    """
    if len(uph_values) == 0:
        raise ValueError("Cannot plot empty UPH sweep")

    if planner is None:
        planner = DosingPlanner()

    plans = [planner.process(replace(line, uph=uph), valve, target_volume) for uph in uph_values]

    uph = np.asarray(uph_values, dtype=float)
    speeds = np.array([plan.line_speed.in_mm_per_s for plan in plans])
    dwell_times = np.array([plan.dwell_time.in_ms for plan in plans])
    trigger_times = np.array([plan.trigger_time.in_ms for plan in plans])
    valve_counts = np.array([plan.valve_count for plan in plans])

    fig, (ax1, ax2, ax3) = plt.subplots(3, 1, figsize=(12, 10), sharex=True)

    if title is None:
        title = (
            f"Dosing Line Analysis\n"
            f"Pitch: {line.pitch.in_mm:.1f} mm, "
            f"Opening: {line.container_opening.in_mm:.1f} mm "
            f"(x{line.opening_safety_factor:.2f}) | "
            f"Target: {target_volume.in_ml:.2f} mL"
        )

    fig.suptitle(title, fontsize=14, fontweight="bold")

    # Plot 1: Line speed
    ax1.plot(uph, speeds, linewidth=2, label="Line Speed")
    ax1.set_ylabel("Line Speed (mm/s)")
    ax1.set_title("Line Speed vs Throughput")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # Plot 2: Dwell and trigger time
    ax2.plot(uph, dwell_times, linewidth=2, label="Max Dwell Time")
    ax2.plot(uph, trigger_times, linewidth=2, linestyle="--", label="Valve Trigger Time")
    ax2.set_ylabel("Time (ms)")
    ax2.set_title(f"Dispensing Window (settle time {planner.settle_time.in_ms:.1f} ms)")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    # Plot 3: Valve count
    ax3.step(uph, valve_counts, where="post", color="purple", linewidth=2, label="Valves")
    ax3.set_ylabel("Required Valves")
    ax3.set_xlabel("Throughput (UPH)")
    ax3.set_title("Required Valve Count")
    ax3.legend()
    ax3.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_valve_curve(
    valve: ValveConfig,
    max_trigger_time: Time,
    points: int = 50,
    title: str = "Valve Response Curve",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot dispensed volume against trigger time (single panel).

    Args:
        valve: Valve configuration
        max_trigger_time: Upper end of the trigger time axis
        points: Number of samples along the curve
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if max_trigger_time.in_ms <= 0:
        raise ValueError(f"max_trigger_time must be positive, got {max_trigger_time.in_ms} ms")
    if points < 2:
        raise ValueError(f"points must be >= 2, got {points}")

    trigger_ms = np.linspace(0.0, max_trigger_time.in_ms, points)
    volumes = np.array(
        [valve.dosing_volume(Time.millisecond(t)).in_ml for t in trigger_ms]
    )

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.plot(trigger_ms, volumes, linewidth=2, label="Dispensed Volume")
    ax.axhline(
        valve.offset.in_ml,
        color="red",
        linestyle="--",
        linewidth=2,
        label=f"Offset ({valve.offset.in_ml:.4f} mL)",
    )
    ax.set_xlabel("Trigger Time (ms)")
    ax.set_ylabel("Volume (mL)")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
