"""Growth estimator classifies the measured points into coarse complexity classes.

The estimation is based on the ratios of the metric (time or memory) between consecutive points.
The ratios are averaged and the mean is compared against fixed thresholds:

  * ``< 1.5``: the metric is (roughly) constant,
  * ``< 3``: the metric grows linearly,
  * ``< 6``: the metric grows nearly linearly (i.e. ``n log n``-like),
  * otherwise the metric grows quadratically or worse.

Note that this is only a heuristic proxy for the asymptotic growth, not a proof of it. The
thresholds have no statistical grounding and are kept as an approximation. Moreover, the verdict
depends entirely on the spacing and the count of the measured sizes: the ratio heuristic only sees
how much the metric grew between two consecutive sizes, not how much the size grew. Hence, e.g.
the linear growth is recognized only for sizes that roughly double; a linear function measured
on sizes growing by the factor of ten will be reported as quadratic or worse. Few data points or
non-geometric progression of the sizes can yield misleading verdicts as well.

The estimator expects the points ordered by ascending size.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Sequence

# Third-Party Imports
import numpy as np

# Asymptote Imports
from asymptote.utils.common import common_kit
from asymptote.utils.structs import Complexity, Dimension, MeasurementPoint

# Zero approximation used instead of non-positive denominators
EPSILON: float = 0.0001
# Minimal number of points needed for the estimation
MIN_POINTS_COUNT: int = 2
# Upper bounds of mean ratios for each of the complexity classes, checked in the order
THRESHOLDS: tuple[tuple[float, Complexity], ...] = (
    (1.5, Complexity.Constant),
    (3.0, Complexity.Linear),
    (6.0, Complexity.NearLinear),
)


def growth_ratios(points: Sequence[MeasurementPoint[Any]], dimension: Dimension) -> list[float]:
    """Computes the ratios of the metric between each two consecutive points

    The non-positive denominators are replaced by the small epsilon and negative ratios are
    floored to zero, so negative memory deltas do not pull the ratios below zero.

    :param list points: ordered list of measured points
    :param Dimension dimension: the dimension of the point, whose ratios are computed
    :return: list of ratios, one shorter than the list of points
    """
    return [
        max(common_kit.safe_division(dimension.of(curr), dimension.of(prev), EPSILON), 0.0)
        for prev, curr in zip(points, points[1:])
    ]


def size_ratios(points: Sequence[MeasurementPoint[Any]]) -> list[float]:
    """Computes the ratios of the input sizes between each two consecutive points

    :param list points: ordered list of measured points
    :return: list of ratios of sizes
    """
    return [
        common_kit.safe_division(curr.input_size, prev.input_size, EPSILON)
        for prev, curr in zip(points, points[1:])
    ]


def mean_ratio(ratios: Sequence[float]) -> float:
    """
    :param list ratios: list of computed growth ratios
    :return: arithmetic mean of the ratios
    """
    return float(np.mean(ratios))


def classify_ratio(average_ratio: float) -> Complexity:
    """Classifies the mean ratio into one of the complexity classes

    :param float average_ratio: the mean of the growth ratios
    :return: estimated complexity class
    """
    for upper_bound, complexity in THRESHOLDS:
        if average_ratio < upper_bound:
            return complexity
    return Complexity.QuadraticOrWorse


def classify(points: Sequence[MeasurementPoint[Any]], dimension: Dimension) -> Complexity:
    """Estimates the complexity class of the growth of the metric of the points

    For fewer than two points the growth cannot be estimated, and indeterminate complexity is
    returned.

    :param list points: list of measured points, ordered by ascending size
    :param Dimension dimension: the dimension whose growth is estimated
    :return: estimated complexity class
    """
    if len(points) < MIN_POINTS_COUNT:
        return Complexity.Indeterminate
    return classify_ratio(mean_ratio(growth_ratios(points, dimension)))


def classify_all(
    points: Sequence[MeasurementPoint[Any]],
) -> dict[Dimension, Complexity]:
    """Estimates the complexity classes for all the measured dimensions

    :param list points: list of measured points, ordered by ascending size
    :return: map of dimensions to their estimated complexity class
    """
    return {dimension: classify(points, dimension) for dimension in Dimension}
