"""List of helper and globally used structures"""
from __future__ import annotations

# Standard Imports
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

# Third-Party Imports

# Asymptote Imports
from asymptote.utils.common.common_kit import ColorChoiceType


InputT = TypeVar("InputT")
ResultT = TypeVar("ResultT")

# The algorithm being measured and the producer of its inputs of given size
FunctionUnderTest = Callable[[InputT], ResultT]
InputGenerator = Callable[[int], InputT]


@dataclass(frozen=True)
class MeasurementPoint(Generic[ResultT]):
    """One observation of a single invocation of the function under test

    :ivar int input_size: the size of the input, for which the function was measured
    :ivar float time_ms: the elapsed wall-clock time in milliseconds
    :ivar float memory_mb: the delta of heap usage in megabytes; this might be negative, when some
        memory was collected during the invocation
    :ivar object result: the value returned by the function under test
    """

    input_size: int
    time_ms: float
    memory_mb: float
    result: ResultT = field(default=None, compare=False, repr=False)  # type: ignore


@dataclass(frozen=True)
class RunConfiguration:
    """Configuration of one benchmark run

    :ivar str name: label of the run, used in the report and the chart
    :ivar tuple sizes: the ordered sequence of the measured input sizes
    :ivar str output_target: path to the stored chart
    """

    __slots__ = ["name", "sizes", "output_target"]

    name: str
    sizes: tuple[int, ...]
    output_target: str


class Complexity(Enum):
    """Coarse buckets of the growth of the measured metric

    The values are the labels printed in the reports.
    """

    Indeterminate = "indeterminate"
    Constant = "O(1) ~ constant"
    Linear = "O(n) ~ linear"
    NearLinear = "O(n log n) ~ nearly-linear"
    QuadraticOrWorse = "O(n^2) or worse"

    @property
    def colour(self) -> ColorChoiceType:
        """
        :return: colour used when printing the verdict
        """
        return COMPLEXITY_COLOURS[self]


COMPLEXITY_COLOURS: dict[Complexity, ColorChoiceType] = {
    Complexity.Indeterminate: "grey",
    Complexity.Constant: "green",
    Complexity.Linear: "green",
    Complexity.NearLinear: "yellow",
    Complexity.QuadraticOrWorse: "red",
}


class Dimension(Enum):
    """Measured dimensions of the point, the value is the name of the attribute of the point"""

    Time = "time_ms"
    Memory = "memory_mb"

    def of(self, point: MeasurementPoint[Any]) -> float:
        """Returns the metric of the point for this dimension

        :param MeasurementPoint point: measured point
        :return: value of the metric
        """
        return getattr(point, self.value)

    @property
    def title(self) -> str:
        """
        :return: human readable name of the dimension
        """
        return "Time" if self is Dimension.Time else "Space"


@dataclass(frozen=True)
class BenchmarkReport:
    """Results of one benchmark run

    :ivar RunConfiguration config: configuration of the run
    :ivar tuple points: the measured points in the order of the requested sizes
    :ivar dict verdicts: estimated complexity for each of the dimensions
    :ivar str chart: path to the stored chart
    """

    __slots__ = ["config", "points", "verdicts", "chart"]

    config: RunConfiguration
    points: tuple[MeasurementPoint[Any], ...]
    verdicts: dict[Dimension, Complexity]
    chart: str


@dataclass(frozen=True)
class BenchmarkSuite:
    """Registered benchmark with its function under test, generator and default sizes

    :ivar str name: name of the benchmark, used in the report
    :ivar function function: the function under test
    :ivar function generator: the generator of the inputs
    :ivar tuple sizes: default sizes of the inputs
    :ivar str output_file: default name of the stored chart
    """

    __slots__ = ["name", "function", "generator", "sizes", "output_file"]

    name: str
    function: Callable[[Any], Any]
    generator: Callable[[int], Any]
    sizes: tuple[int, ...]
    output_file: str
