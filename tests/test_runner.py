"""Tests of running the whole benchmarks, from the measuring to the stored chart"""
from __future__ import annotations

# Standard Imports
import os

# Third-Party Imports
import numpy as np
import pytest

# Asymptote Imports
from asymptote.logic import config, runner
from asymptote.testing.utils import costing, list_of
from asymptote.utils.exceptions import InvalidParameterException
from asymptote.utils.structs import Complexity, Dimension


def fake_exporter(exported):
    """Creates exporter, which only records its arguments"""

    def exporter(name, points, output_dir, file_name, **kwargs):
        exported.append((name, points, output_dir, file_name, kwargs))
        return os.path.join(output_dir, file_name)

    return exporter


@pytest.mark.usefixtures("cleandir")
def test_quadratic_and_linear(clock, heap, capsys):
    """Test the verdicts of the quadratic cost on tenfold and linear cost on doubling sizes"""
    quadratic = costing(clock, lambda n: n * n)
    result = runner.run_benchmark(
        "Quadratic", quadratic, list_of, [100, 1000, 10000], clock=clock, heap=heap
    )
    assert result.verdicts[Dimension.Time] == Complexity.QuadraticOrWorse
    assert result.verdicts[Dimension.Memory] == Complexity.Constant

    linear = costing(clock, lambda n: 7 * n, heap, 8)
    result = runner.run_benchmark(
        "Linear", linear, list_of, [1000, 2000, 4000, 8000], clock=clock, heap=heap
    )
    assert result.verdicts[Dimension.Time] == Complexity.Linear
    assert result.verdicts[Dimension.Memory] == Complexity.Linear

    out, _ = capsys.readouterr()
    assert "[Benchmark: Quadratic]" in out
    assert "[Benchmark: Linear]" in out
    assert "Chart generated at" in out


@pytest.mark.usefixtures("cleandir")
def test_points_and_chart(clock, heap):
    """Test that there is one point per size, in the requested order, and the chart is stored"""
    sizes = [300, 10, 2000, 10]
    result = runner.run_benchmark(
        "Unordered", costing(clock, float), list_of, sizes, "unordered.png", clock=clock, heap=heap
    )
    assert [point.input_size for point in result.points] == sizes
    assert [point.result for point in result.points] == sizes
    assert result.config.sizes == tuple(sizes)
    assert result.chart == os.path.join("analytics", "unordered.png")
    assert result.config.output_target == result.chart
    assert os.path.exists(result.chart)


def test_summing_array_with_doubling_cost(clock, heap):
    """Test summing the array, whose time doubles between the sizes

    Expecting mean ratio of the time between 1.5 and 3, i.e. the linear growth.
    """
    exported = []
    step_cost = {10: 100_000, 100: 200_000, 1000: 400_000, 10000: 800_000}

    def summing(arr):
        clock.advance(step_cost[len(arr)])
        return sum(arr)

    result = runner.run_benchmark(
        "Sum",
        summing,
        list_of,
        [10, 100, 1000, 10000],
        clock=clock,
        heap=heap,
        exporter=fake_exporter(exported),
    )
    assert [point.result for point in result.points] == [45, 4950, 499500, 49995000]
    assert result.verdicts[Dimension.Time] == Complexity.Linear
    assert len(exported) == 1
    name, points, output_dir, file_name, kwargs = exported[0]
    assert (name, output_dir, file_name) == ("Sum", "analytics", "benchmark.png")
    assert points == result.points
    assert kwargs == {"width": 800, "height": 600}


def test_empty_sizes(clock, heap):
    """Test that no sizes yield empty report with indeterminate verdicts"""
    exported = []
    result = runner.run_benchmark(
        "Empty", len, list_of, [], clock=clock, heap=heap, exporter=fake_exporter(exported)
    )
    assert result.points == ()
    assert set(result.verdicts.values()) == {Complexity.Indeterminate}
    assert len(exported) == 1


@pytest.mark.parametrize("sizes", [[10, 0], [-1], [1.5], ["10"], [True]])
def test_invalid_sizes(clock, heap, sizes):
    """Test that the invalid sizes are rejected before anything is measured"""
    calls = []
    with pytest.raises(InvalidParameterException) as exc:
        runner.run_benchmark("Invalid", calls.append, list_of, sizes, clock=clock, heap=heap)
    assert "sizes" in str(exc.value)
    assert calls == []


def test_numpy_sizes(clock, heap):
    """Test that the integer scalars of numpy are accepted as sizes and converted to int"""
    result = runner.run_benchmark(
        "Numpy",
        costing(clock, float),
        list_of,
        list(np.array([1, 2, 4])),
        clock=clock,
        heap=heap,
        exporter=fake_exporter([]),
    )
    assert result.config.sizes == (1, 2, 4)
    assert all(type(size) is int for size in result.config.sizes)
    assert [point.input_size for point in result.points] == [1, 2, 4]

    with pytest.raises(InvalidParameterException):
        runner.validate_sizes(list(np.array([1.0, 2.0])))


def test_errors_are_propagated(clock, heap, capsys):
    """Test that the errors of the generator and the function stop the run without report"""
    exported = []

    def failing_generator(size):
        if size > 10:
            raise ValueError("too large")
        return list_of(size)

    with pytest.raises(ValueError, match="too large"):
        runner.run_benchmark(
            "Failing",
            len,
            failing_generator,
            [10, 100],
            clock=clock,
            heap=heap,
            exporter=fake_exporter(exported),
        )

    def failing_function(_):
        raise ZeroDivisionError("division by zero")

    with pytest.raises(ZeroDivisionError):
        runner.run_benchmark(
            "Failing",
            failing_function,
            list_of,
            [10],
            clock=clock,
            heap=heap,
            exporter=fake_exporter(exported),
        )

    out, _ = capsys.readouterr()
    assert "[Benchmark: Failing]" not in out
    assert exported == []


def test_exporter_failure_after_report(clock, heap, capsys):
    """Test that failing to store the chart propagates, but the report is already printed"""

    def failing_exporter(*_, **__):
        raise PermissionError("read-only file system")

    with pytest.raises(PermissionError):
        runner.run_benchmark(
            "Readonly", len, list_of, [1, 2], clock=clock, heap=heap, exporter=failing_exporter
        )
    out, _ = capsys.readouterr()
    assert "[Benchmark: Readonly]" in out
    assert "Chart generated at" not in out


def test_garbage_collection(clock, heap):
    """Test that the garbage collection is requested before each size, unless disabled"""
    collections = []
    runner.run_benchmark(
        "Collected",
        len,
        list_of,
        [1, 2, 3],
        clock=clock,
        heap=heap,
        collect_garbage=lambda: collections.append(1),
        exporter=fake_exporter([]),
    )
    assert len(collections) == 3

    config.runtime().set("sampler.collect_garbage", False)
    runner.run_benchmark(
        "Not collected",
        len,
        list_of,
        [1, 2, 3],
        clock=clock,
        heap=heap,
        collect_garbage=lambda: collections.append(1),
        exporter=fake_exporter([]),
    )
    assert len(collections) == 3

    # Missing capability is silently skipped
    runner.run_benchmark(
        "Missing",
        len,
        list_of,
        [1],
        clock=clock,
        heap=heap,
        collect_garbage=None,
        exporter=fake_exporter([]),
    )


def test_output_from_configuration(clock, heap):
    """Test that the output directory, file name and size of the chart are taken from config"""
    exported = []
    config.runtime().set("output.dir", "charts")
    config.runtime().set("output.filename", "configured.svg")
    config.runtime().set("chart.width", 1024)

    result = runner.run_benchmark(
        "Configured", len, list_of, [1, 2], clock=clock, heap=heap, exporter=fake_exporter(exported)
    )
    assert result.chart == os.path.join("charts", "configured.svg")
    assert exported[0][4] == {"width": 1024, "height": 600}

    result = runner.run_benchmark(
        "Overridden",
        len,
        list_of,
        [1, 2],
        "given.png",
        output_dir="elsewhere",
        clock=clock,
        heap=heap,
        exporter=fake_exporter(exported),
    )
    assert result.chart == os.path.join("elsewhere", "given.png")


def test_run_suite(monkeypatch):
    """Test running the registered suite with the sizes from parameters and configuration"""
    recorded = []

    def recording_run(name, function, generator, sizes, output_file_name, **kwargs):
        recorded.append((name, tuple(sizes), output_file_name, kwargs))

    monkeypatch.setattr(runner, "run_benchmark", recording_run)
    runner.run_suite("longest_substring")
    runner.run_suite("longest_substring", [5, 10], "custom.png", "out")
    config.runtime().set("suites.longest_substring.sizes", [7, 14])
    runner.run_suite("longest_substring")

    assert recorded == [
        (
            "Longest Substring",
            (1000, 5000, 10000, 50000, 100000),
            "lengthOfLongestSubstring.png",
            {"output_dir": None},
        ),
        ("Longest Substring", (5, 10), "custom.png", {"output_dir": "out"}),
        ("Longest Substring", (7, 14), "lengthOfLongestSubstring.png", {"output_dir": None}),
    ]

    with pytest.raises(InvalidParameterException):
        runner.run_suite("unknown_suite")


@pytest.mark.usefixtures("cleandir")
def test_run_with_real_capabilities():
    """Test the run with the real clock, traced heap and garbage collection"""
    result = runner.run_benchmark("Real", sum, list_of, [10, 100])
    assert [point.result for point in result.points] == [45, 4950]
    assert all(point.time_ms >= 0 for point in result.points)
    assert os.path.exists(result.chart)
