"""Asymptote can be run from the command line (if correctly installed) using the command interface.

The Command Line Interface is implemented using the Click_ library, which allows both effective
definition of new commands and finer parsing of the command line arguments. The interface consists
of the following commands:

    1. ``list``: lists the registered benchmark suites together with their default sizes.

    2. ``run``: runs one of the registered suites, prints its report to the standard output and
    stores its chart to the output directory.

    3. ``config``: prints the effective configuration, i.e. the merged runtime, local and default
    configuration.

.. _Click: https://click.palletsprojects.com/
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Optional
import os

# Third-Party Imports
import click

# Asymptote Imports
from asymptote import suites
from asymptote.logic import config, runner
from asymptote.utils import log, streams
from asymptote.utils.common import cli_kit, common_kit
from asymptote.utils.exceptions import InvalidParameterException, MissingConfigSectionException


@click.group()
@click.option(
    "--no-color",
    "-nc",
    default=False,
    is_flag=True,
    help="Disables the colored output.",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    default=0,
    help=(
        "Increases the verbosity of the standard output. Verbosity is incremental, and each level"
        " increases the extent of output."
    ),
)
@click.option(
    "--config",
    "-c",
    "config_file",
    default=None,
    type=click.Path(dir_okay=False),
    callback=cli_kit.set_config_option_from_flag(config.runtime, "config_file", os.path.abspath),
    help=f"Sets the local configuration file (by default ``{config.LOCAL_CONFIG_FILE}``).",
)
@click.option(
    "--version",
    help="Prints the current version of Asymptote.",
    is_eager=True,
    is_flag=True,
    default=False,
    callback=cli_kit.print_version,
)
def cli(no_color: bool = False, verbose: int = 0, **_: Any) -> None:
    """Asymptote is a light-weight harness estimating the asymptotic complexity of algorithms.

    Asymptote runs the measured function for the inputs of increasing sizes, records the elapsed
    time and the change of the used memory, and estimates, how both of the metrics grow. In order
    to list the registered benchmarks run the following::

        asymptote list

    In order to run one of the benchmarks run the following::

        asymptote run longest_substring --sizes 1000 --sizes 2000 --sizes 4000
    """
    log.COLOR_OUTPUT = not no_color

    # set the verbosity level of the log
    if log.VERBOSITY < verbose:
        log.VERBOSITY = verbose


@cli.command("list")
def list_suites() -> None:
    """Lists the registered benchmark suites and their default sizes."""
    suite_names = suites.get_supported_suite_names()
    log.major_info(f"Found {common_kit.str_to_plural(len(suite_names), 'suite')}")
    for suite_name in suite_names:
        suite = suites.load_suite(suite_name)
        sizes = ", ".join(str(size) for size in suite.sizes)
        log.minor_status(
            log.highlight(suite_name),
            status=f"{suite.name} (sizes: {log.in_color(sizes, common_kit.SIZE_COLOUR)})",
        )


@cli.command()
@click.argument(
    "suite",
    required=True,
    metavar="<suite>",
    type=click.Choice(suites.get_supported_suite_names()),
)
@click.option(
    "--sizes",
    "-s",
    type=int,
    multiple=True,
    callback=cli_kit.sizes_callback,
    help=(
        "Sets the sizes of the generated inputs (can be repeated). The sizes should be given in"
        " ascending order; by default the sizes of the suite are used."
    ),
)
@click.option(
    "--output-file",
    "-o",
    default=None,
    help="Sets the name of the stored chart (by default the name given by the suite).",
)
@click.option(
    "--output-dir",
    "-d",
    default=None,
    help="Sets the directory, where the chart is stored (by default ``analytics``).",
)
@log.print_elapsed_time
def run(
    suite: str, sizes: tuple[int, ...], output_file: Optional[str], output_dir: Optional[str]
) -> None:
    """Runs the benchmark <suite> and stores its chart.

    For each of the sizes one input is generated and the measured function is invoked exactly
    once. The report with the measured time and memory, the growth between the consecutive sizes
    and the estimated complexity is printed to the standard output.
    """
    try:
        runner.run_suite(suite, sizes, output_file, output_dir)
    except (InvalidParameterException, MissingConfigSectionException) as invalid_exception:
        log.error(f"invalid benchmark configuration: {invalid_exception}")
    except OSError as os_error:
        log.error(f"could not store the chart: {os_error}")


@cli.command("config")
def show_config() -> None:
    """Prints the effective configuration of Asymptote."""
    log.major_info("Effective configuration")
    log.write(streams.yaml_to_string(config.effective()))


def launch_cli() -> None:
    """Safely launches the cli"""
    cli()


if __name__ == "__main__":
    launch_cli()
