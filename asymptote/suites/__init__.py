"""Suites package contains the registered benchmarks, which can be run from the command line.

Each suite is a module of this package, which defines the ``SUITE`` object of the type
:class:`asymptote.utils.structs.BenchmarkSuite`, i.e. the name of the benchmark, the function
under test, the generator of its inputs, the default sizes and the default name of the chart.

The default sizes of the suite can be overridden in the configuration as follows:

  .. code-block:: yaml

      suites:
        longest_substring:
          sizes: [1000, 2000, 4000, 8000]
"""
from __future__ import annotations

# Standard Imports
import os
import pkgutil

# Third-Party Imports

# Asymptote Imports
from asymptote.utils.common import common_kit
from asymptote.utils.exceptions import InvalidParameterException
from asymptote.utils.structs import BenchmarkSuite


def get_supported_suite_names() -> list[str]:
    """Lists the names of all the modules of the suites package

    :return: sorted list of names of the registered suites
    """
    return sorted(
        module_name
        for _, module_name, _ in pkgutil.iter_modules([os.path.dirname(__file__)])
        if not module_name.startswith("_")
    )


def load_suite(suite_name: str) -> BenchmarkSuite:
    """Loads the suite of the given name

    :param str suite_name: name of the registered suite
    :return: the loaded suite
    :raises InvalidParameterException: when there is no suite of the given name
    """
    supported_suites = get_supported_suite_names()
    if suite_name not in supported_suites:
        raise InvalidParameterException(
            "suite", suite_name, f"(choose from {', '.join(supported_suites)})"
        )
    return common_kit.get_module(f"asymptote.suites.{suite_name}").SUITE
