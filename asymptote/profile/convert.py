"""``asymptote.profile.convert`` is a module which specifies interface for conversion of the
measured points to other formats.

.. _pandas: https://pandas.pydata.org/

Currently, the points can be converted to the `pandas`_ data frame, which is used both for the
tabular output and as the source of the data for the charts::

    >>> convert.points_to_dataframe(points)
           n  time [ms]  memory [MB]
    0    100      0.154        0.002
    1   1000      1.532        0.015
    2  10000     15.730        0.153
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Sequence

# Third-Party Imports
import pandas

# Asymptote Imports
from asymptote.utils.structs import MeasurementPoint

SIZE_COLUMN: str = "n"
TIME_COLUMN: str = "time [ms]"
MEMORY_COLUMN: str = "memory [MB]"
COLUMNS: tuple[str, str, str] = (SIZE_COLUMN, TIME_COLUMN, MEMORY_COLUMN)


def points_to_dataframe(points: Sequence[MeasurementPoint[Any]]) -> pandas.DataFrame:
    """Converts the measured points to the format supported by the `pandas`_ library.

    Each point corresponds to one row of the data frame, in the order of the points. The results
    of the function under test are not part of the data frame.

    :param list points: list of measured points
    :returns: data frame with the size, time and memory columns
    """
    return pandas.DataFrame(
        {
            SIZE_COLUMN: [point.input_size for point in points],
            TIME_COLUMN: [point.time_ms for point in points],
            MEMORY_COLUMN: [point.memory_mb for point in points],
        },
        columns=list(COLUMNS),
    )
