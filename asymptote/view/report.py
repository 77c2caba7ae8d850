"""Report prints the results of the benchmark run to the standard output.

The report consists of the name of the run, the table of the measured points, the growth of the
metrics between consecutive sizes and the estimated complexity of time and space. The tables are
rendered by the tabulate package.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Sequence

# Third-Party Imports
import tabulate

# Asymptote Imports
from asymptote.postprocess import growth
from asymptote.profile import convert
from asymptote.utils import log
from asymptote.utils.common import common_kit
from asymptote.utils.structs import Complexity, Dimension, MeasurementPoint, RunConfiguration

TABLE_FORMAT: str = "simple"
POINTS_FLOAT_FORMAT: tuple[str, str, str] = (".0f", ".4f", ".4f")
GROWTH_HEADERS: tuple[str, ...] = ("n", "n x", "time x", "memory x")


def points_to_table(points: Sequence[MeasurementPoint[Any]], tablefmt: str = TABLE_FORMAT) -> str:
    """Renders the measured points as a table of sizes, times and memory deltas

    :param list points: list of measured points
    :param str tablefmt: format of the table (see tabulate package)
    :return: tabular representation of the points
    """
    dataframe = convert.points_to_dataframe(points)
    return tabulate.tabulate(
        dataframe,
        headers="keys",
        showindex=False,
        tablefmt=tablefmt,
        floatfmt=POINTS_FLOAT_FORMAT,
    )


def growth_to_table(points: Sequence[MeasurementPoint[Any]], tablefmt: str = TABLE_FORMAT) -> str:
    """Renders the growth of sizes and metrics between each two consecutive points

    :param list points: list of measured points
    :param str tablefmt: format of the table (see tabulate package)
    :return: tabular representation of the growth
    """
    transitions = [
        f"{prev.input_size} -> {curr.input_size}" for prev, curr in zip(points, points[1:])
    ]
    rows = zip(
        transitions,
        growth.size_ratios(points),
        growth.growth_ratios(points, Dimension.Time),
        growth.growth_ratios(points, Dimension.Memory),
    )
    return tabulate.tabulate(
        list(rows), headers=list(GROWTH_HEADERS), tablefmt=tablefmt, floatfmt=".2f"
    )


def verdict_to_string(verdict: Complexity) -> str:
    """
    :param Complexity verdict: estimated complexity
    :return: coloured label of the complexity
    """
    return log.in_color(verdict.value, verdict.colour, common_kit.HEADER_ATTRS)


def report(
    config: RunConfiguration,
    points: Sequence[MeasurementPoint[Any]],
    verdicts: dict[Dimension, Complexity],
) -> None:
    """Prints the report of the benchmark run to the standard output

    Note that the report does not modify the points in any way, hence it can be printed repeatedly.

    :param RunConfiguration config: configuration of the run
    :param list points: list of measured points
    :param dict verdicts: estimated complexities of the dimensions
    """
    log.major_info(f"Benchmark: {config.name}", no_title=True)
    log.write(points_to_table(points))

    if len(points) >= growth.MIN_POINTS_COUNT:
        log.newline()
        log.minor_info("Growth between the sizes")
        log.write(growth_to_table(points))

    log.newline()
    log.minor_info("Estimated complexity")
    log.increase_indent()
    for dimension in Dimension:
        verdict = verdicts.get(dimension, Complexity.Indeterminate)
        log.minor_status(dimension.title, status=verdict_to_string(verdict))
    log.decrease_indent()
