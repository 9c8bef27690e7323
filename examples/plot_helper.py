"""Helper functions for creating matplotlib plots in examples."""

import os
from typing import Optional, Sequence

from dosing_systems import LineConfig, ValveConfig, Volume
from dosing_systems.visualize import plot_uph_sweep


def save_sweep_plot(
    line: LineConfig,
    valve: ValveConfig,
    target_volume: Volume,
    uph_values: Sequence[float],
    filename: str,
    title: Optional[str] = None,
) -> None:
    """Save a UPH sweep plot to file.

    Args:
        line: Line configuration
        valve: Valve configuration
        target_volume: Volume to dose into each container
        uph_values: Throughputs to evaluate
        filename: Output filename (e.g., "my_plot.png")
        title: Optional custom title
    """
    if not filename.endswith((".png", ".jpg", ".pdf")):
        filename += ".png"

    plot_uph_sweep(
        line=line,
        valve=valve,
        target_volume=target_volume,
        uph_values=uph_values,
        title=title,
        show=False,
        save_path=filename,
    )
    print(f"  Plot saved: {filename}")


def generate_example_plot(
    name: str,
    line: LineConfig,
    valve: ValveConfig,
    target_volume: Volume,
    uph_values: Sequence[float],
    output_dir: Optional[str] = None,
) -> None:
    """Generate and save a sweep plot with automatic naming.

    Args:
        name: Base name for the plot (e.g., "vial_line")
        line: Line configuration
        valve: Valve configuration
        target_volume: Volume to dose into each container
        uph_values: Throughputs to evaluate
        output_dir: Optional output directory (defaults to caller's directory)
    """
    if output_dir is None:
        import inspect

        caller_frame = inspect.stack()[1]
        caller_file = caller_frame.filename
        output_dir = os.path.dirname(os.path.abspath(caller_file))

    filename = os.path.join(output_dir, f"{name}_plot.png")
    title = f"{name.replace('_', ' ').title()}: {target_volume.in_ml:.2f} mL target"

    save_sweep_plot(
        line=line,
        valve=valve,
        target_volume=target_volume,
        uph_values=uph_values,
        filename=filename,
        title=title,
    )
