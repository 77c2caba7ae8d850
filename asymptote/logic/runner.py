"""Runner orchestrates the benchmark run.

For each of the requested sizes (in the given order) the runner lets the sampler measure one
invocation of the function under test. The resulting sequence of points is then classified by the
growth estimator, printed by the report and rendered into the chart.

The run is strictly sequential: the sizes are measured one after another and no two measurements
ever run concurrently, since they would corrupt the shared baseline of the heap. Any error raised
during the run (by the generator, the function under test or while storing the chart) is
propagated to the caller without any retries.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Iterable, Optional
import numbers
import os

# Third-Party Imports
import progressbar

# Asymptote Imports
from asymptote import suites
from asymptote.collect import sampler
from asymptote.logic import config
from asymptote.postprocess import growth
from asymptote.utils import log
from asymptote.utils.common import common_kit
from asymptote.utils.exceptions import InvalidParameterException
from asymptote.utils.structs import (
    BenchmarkReport,
    FunctionUnderTest,
    InputGenerator,
    InputT,
    MeasurementPoint,
    ResultT,
    RunConfiguration,
)
from asymptote.view import chart, report

ChartExporter = Callable[..., str]


def validate_sizes(sizes: Iterable[Any]) -> tuple[int, ...]:
    """Checks that all the sizes are positive integers

    Any integral type (e.g. the integer scalars of numpy) is accepted and converted to int.

    :param list sizes: list of requested sizes
    :return: tuple of validated sizes in the original order
    :raises InvalidParameterException: when some of the sizes is not a positive integer
    """
    validated = []
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
            raise InvalidParameterException("sizes", size, "(sizes must be positive integers)")
        validated.append(int(size))
    return tuple(validated)


def resolve_garbage_collector(
    collect_garbage: sampler.GarbageCollector,
) -> sampler.GarbageCollector:
    """Disables the garbage collection, if it is turned off in the configuration

    :param function collect_garbage: requested garbage collection
    :return: the garbage collection or None if it is disabled
    """
    if not config.lookup_key_recursively("sampler.collect_garbage", True):
        return None
    return collect_garbage


def collect_points(
    sizes: tuple[int, ...],
    generator: InputGenerator[InputT],
    function_under_test: FunctionUnderTest[InputT, ResultT],
    clock: sampler.Clock,
    heap: sampler.HeapProbe,
    collect_garbage: sampler.GarbageCollector,
) -> tuple[MeasurementPoint[ResultT], ...]:
    """Measures the function under test for each of the sizes, one after another

    :param tuple sizes: requested sizes of the inputs
    :param function generator: generator of the inputs of given size
    :param function function_under_test: measured function
    :param function clock: monotonic clock returning nanoseconds
    :param HeapProbe heap: probe of the heap usage
    :param function collect_garbage: optional request of the garbage collection
    :return: tuple of measured points, in the order of the sizes
    """
    log.minor_info(f"Measuring {common_kit.str_to_plural(len(sizes), 'size')}")
    if not sizes:
        return ()
    log.msg_to_stdout(f"sizes: {', '.join(str(size) for size in sizes)}", log.VERBOSE_INFO)

    points = []
    for size in progressbar.progressbar(sizes):
        points.append(
            sampler.measure(size, generator, function_under_test, clock, heap, collect_garbage)
        )
    log.newline()
    return tuple(points)


def run_benchmark(
    name: str,
    function_under_test: FunctionUnderTest[InputT, ResultT],
    generator: InputGenerator[InputT],
    sizes: Iterable[int],
    output_file_name: Optional[str] = None,
    *,
    output_dir: Optional[str] = None,
    clock: sampler.Clock = sampler.DEFAULT_CLOCK,
    heap: Optional[sampler.HeapProbe] = None,
    collect_garbage: sampler.GarbageCollector = sampler.DEFAULT_GARBAGE_COLLECTOR,
    exporter: ChartExporter = chart.export_chart,
) -> BenchmarkReport:
    """Runs the benchmark of the function under test for each of the sizes

    The results are printed to the standard output and the chart is stored to the output
    directory (by default ``analytics`` in the current working directory) under the given name
    (by default ``benchmark.png``). Both defaults can be changed in the configuration.

    :param str name: name of the benchmark, used in the report and the chart
    :param function function_under_test: measured function taking the generated input
    :param function generator: generator of the input of the given size
    :param list sizes: ordered list of input sizes; these should be ascending, otherwise the
        estimated complexity is meaningless
    :param str output_file_name: name of the stored chart
    :param str output_dir: directory where the chart is stored
    :param function clock: monotonic clock returning nanoseconds
    :param HeapProbe heap: probe of the heap usage, by default the tracemalloc based probe
    :param function collect_garbage: garbage collection requested before each measurement; None
        skips the collection
    :param function exporter: function rendering and storing the chart
    :return: report of the benchmark run
    :raises InvalidParameterException: when some of the sizes is not a positive integer
    """
    validated_sizes = validate_sizes(sizes)
    output_dir = output_dir or config.lookup_key_recursively("output.dir")
    output_file_name = output_file_name or config.lookup_key_recursively("output.filename")
    run_config = RunConfiguration(
        name=name,
        sizes=validated_sizes,
        output_target=os.path.join(output_dir, output_file_name),
    )

    owned_heap = sampler.TracedHeap() if heap is None else None
    try:
        points = collect_points(
            validated_sizes,
            generator,
            function_under_test,
            clock,
            heap if heap is not None else owned_heap,
            resolve_garbage_collector(collect_garbage),
        )
    finally:
        if owned_heap is not None:
            owned_heap.stop()

    verdicts = growth.classify_all(points)
    report.report(run_config, points, verdicts)

    chart_path = exporter(
        name,
        points,
        output_dir,
        output_file_name,
        width=config.lookup_key_recursively("chart.width"),
        height=config.lookup_key_recursively("chart.height"),
    )
    log.newline()
    log.minor_status("Chart generated at", status=log.path_style(chart_path))

    return BenchmarkReport(config=run_config, points=points, verdicts=verdicts, chart=chart_path)


def run_suite(
    suite_name: str,
    sizes: Optional[Iterable[int]] = None,
    output_file_name: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> BenchmarkReport:
    """Runs the registered suite of the given name

    The sizes are looked up in the following order: the sizes given as parameter, the sizes set
    in the configuration under the ``suites.<name>.sizes`` key and the default sizes of the suite.

    :param str suite_name: name of the registered suite
    :param list sizes: sizes overriding the sizes of the suite
    :param str output_file_name: name of the stored chart, overriding the name of the suite
    :param str output_dir: directory where the chart is stored
    :return: report of the benchmark run
    :raises InvalidParameterException: when the suite does not exist or the sizes are invalid
    """
    suite = suites.load_suite(suite_name)
    sizes = sizes or config.lookup_key_recursively(f"suites.{suite_name}.sizes", suite.sizes)
    return run_benchmark(
        suite.name,
        suite.function,
        suite.generator,
        sizes,
        output_file_name or suite.output_file,
        output_dir=output_dir,
    )
