"""Chart renders the measured points into the line chart stored as an image.

The chart contains two series, the time and the memory, plotted against the input size. The chart
is rendered by the matplotlib library using the non-interactive backend, and its format is given
by the extension of the output file (e.g. ``png``, ``svg`` or ``pdf``).
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Sequence
import os

# Third-Party Imports
import matplotlib.pyplot as plt

# Asymptote Imports
from asymptote.profile import convert
from asymptote.utils.common import common_kit
from asymptote.utils.structs import MeasurementPoint

MATPLOT_LIB_INITIALIZED = False

DEFAULT_FILE_NAME: str = "benchmark.png"
DEFAULT_WIDTH: int = 800
DEFAULT_HEIGHT: int = 600
DPI: int = 100

TIME_COLOUR: str = "#4bc0c0"
MEMORY_COLOUR: str = "#ff6384"
LINE_WIDTH: int = 2
TITLE_FONTSIZE: int = 18
TITLE_PAD: int = 30


def lazy_initialize_matplotlib() -> None:
    """Helper function for lazy initialization of matplotlib"""
    global MATPLOT_LIB_INITIALIZED
    if not MATPLOT_LIB_INITIALIZED:
        # Force matplotlib to not use any Xwindows backend.
        plt.switch_backend("agg")
        MATPLOT_LIB_INITIALIZED = True


def export_chart(
    name: str,
    points: Sequence[MeasurementPoint[Any]],
    output_dir: str,
    file_name: str = DEFAULT_FILE_NAME,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> str:
    """Renders the line chart of the time and memory of the points and stores it to the file

    The output directory is created, if it does not exist yet. Errors raised during the rendering
    or storing of the chart are propagated to the caller.

    :param str name: name of the benchmark, used in the title of the chart
    :param list points: list of measured points
    :param str output_dir: directory, where the chart will be stored
    :param str file_name: name of the stored chart
    :param int width: width of the chart in pixels
    :param int height: height of the chart in pixels
    :return: path to the stored chart
    """
    lazy_initialize_matplotlib()
    common_kit.touch_dir(output_dir)
    output_path = os.path.join(output_dir, file_name)

    dataframe = convert.points_to_dataframe(points)
    labels = [str(size) for size in dataframe[convert.SIZE_COLUMN]]

    figure, axis = plt.subplots(figsize=(width / DPI, height / DPI), dpi=DPI)
    try:
        axis.plot(
            labels,
            dataframe[convert.TIME_COLUMN],
            label="Time (ms)",
            color=TIME_COLOUR,
            linewidth=LINE_WIDTH,
            marker="o",
        )
        axis.plot(
            labels,
            dataframe[convert.MEMORY_COLUMN],
            label="Memory (MB)",
            color=MEMORY_COLOUR,
            linewidth=LINE_WIDTH,
            marker="o",
        )
        axis.set_title(f"Benchmark: {name}", fontsize=TITLE_FONTSIZE, pad=TITLE_PAD)
        axis.set_xlabel("Input Size (n)")
        axis.set_ylabel("Time / Memory")
        axis.legend(loc="lower center", bbox_to_anchor=(0.5, 1.0), ncol=2, frameon=False)
        axis.grid(True, alpha=0.3)
        figure.tight_layout()
        figure.savefig(output_path)
    finally:
        plt.close(figure)

    return output_path
