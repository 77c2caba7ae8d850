"""Basic tests of the command line interface"""
from __future__ import annotations

# Standard Imports
import os

# Third-Party Imports
from click.testing import CliRunner
import pytest

# Asymptote Imports
import asymptote
from asymptote import cli
from asymptote.logic import config
from asymptote.testing import asserts
from asymptote.utils import log


def test_version():
    """Test printing the version of asymptote"""
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--version"])
    asserts.predicate_from_cli(result, result.exit_code == 0)
    asserts.predicate_from_cli(result, f"Asymptote {asymptote.__version__}" in result.output)


def test_list():
    """Test listing the registered suites"""
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--no-color", "list"])
    asserts.predicate_from_cli(result, result.exit_code == 0)
    asserts.predicate_from_cli(result, "[Found 3 Suites]" in result.output)
    asserts.predicate_from_cli(result, "Longest_substring_brute_force" in result.output)
    asserts.predicate_from_cli(result, "30, 300, 3000" in result.output)


def test_run(cleandir):
    """Test running the suite with the sizes and the output given from the command line

    Expecting the report in the output and the chart in the output directory.
    """
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "-nc",
            "-v",
            "run",
            "longest_substring",
            "-s",
            "100",
            "-s",
            "200",
            "-o",
            "substring.png",
            "-d",
            "charts",
        ],
    )
    asserts.predicate_from_cli(result, result.exit_code == 0)
    asserts.predicate_from_cli(result, "[Benchmark: Longest Substring]" in result.output)
    asserts.predicate_from_cli(result, "sizes: 100, 200" in result.output)
    asserts.predicate_from_cli(result, "Estimated complexity" in result.output)
    asserts.predicate_from_cli(result, "Elapsed time" in result.output)
    assert log.VERBOSITY == log.VERBOSE_INFO
    assert os.path.exists(os.path.join(cleandir, "charts", "substring.png"))


def test_run_with_config_file(cleandir):
    """Test running the suite with the sizes and output set in the given configuration file"""
    with open("bench.yml", "w") as config_handle:
        config_handle.write(
            "output:\n"
            "  dir: configured\n"
            "suites:\n"
            "  maximum_sum_subarray:\n"
            "    sizes: [10, 20]\n"
        )
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-nc", "--config", "bench.yml", "run", "maximum_sum_subarray"])
    asserts.predicate_from_cli(result, result.exit_code == 0)
    asserts.predicate_from_cli(result, "Measuring 2 sizes" in result.output)
    assert os.path.exists(
        os.path.join(cleandir, "configured", "maximum-sum-subarray-benchmark.png")
    )
    config_file = config.runtime().get("config_file")
    assert os.path.samefile(config_file, os.path.join(cleandir, "bench.yml"))


def test_run_invalid():
    """Test running the unknown suite and the invalid sizes"""
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["run", "quicksort"])
    asserts.invalid_cli_choice(result, "quicksort")

    result = runner.invoke(cli.cli, ["run", "longest_substring", "-s", "0"])
    asserts.predicate_from_cli(result, result.exit_code == 2)
    asserts.predicate_from_cli(result, "is not a positive integer" in result.output)

    result = runner.invoke(cli.cli, ["run", "longest_substring", "-s", "ten"])
    asserts.predicate_from_cli(result, result.exit_code == 2)


@pytest.mark.usefixtures("cleandir")
def test_run_invalid_config():
    """Test that the invalid sizes in configuration end with the error"""
    config.runtime().set("suites.longest_substring.sizes", [100, -1])
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-nc", "run", "longest_substring"])
    asserts.predicate_from_cli(result, result.exit_code == 1)
    asserts.predicate_from_cli(result, "invalid benchmark configuration" in result.output)


@pytest.mark.usefixtures("cleandir")
def test_run_unwritable_output():
    """Test that the failure of storing the chart ends with the error after the report"""
    with open("blocked", "w") as blocking_file:
        blocking_file.write("not a directory")
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["-nc", "run", "longest_substring", "-s", "10", "-d", "blocked"]
    )
    asserts.predicate_from_cli(result, result.exit_code == 1)
    asserts.predicate_from_cli(result, "[Benchmark: Longest Substring]" in result.output)
    asserts.predicate_from_cli(result, "could not store the chart" in result.output)


def test_config():
    """Test printing the effective configuration"""
    config.runtime().set("chart.width", 640)
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-nc", "config"])
    asserts.predicate_from_cli(result, result.exit_code == 0)
    asserts.predicate_from_cli(result, "width: 640" in result.output)
    asserts.predicate_from_cli(result, "dir: analytics" in result.output)


def test_config_with_list_config_file(cleandir):
    """Test that the local configuration, which is not a mapping, falls back to the defaults"""
    with open(os.path.join(cleandir, config.LOCAL_CONFIG_FILE), "w") as config_handle:
        config_handle.write("- 1\n- 2\n")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-nc", "config"])
    asserts.predicate_from_cli(result, result.exit_code == 0)
    asserts.predicate_from_cli(result, "is not a mapping" in result.output)
    asserts.predicate_from_cli(result, "dir: analytics" in result.output)
