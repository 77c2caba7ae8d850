"""Set of helper functions for working with command line interface"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable
import sys

# Third-Party Imports
import click

# Asymptote Imports
import asymptote
from asymptote.logic import config
from asymptote.utils import log


def print_version(_: click.Context, __: click.Option, value: bool) -> None:
    """Prints current version of Asymptote and ends"""
    if value:
        log.write(f"Asymptote {asymptote.__version__}")
        sys.exit(0)


def set_config_option_from_flag(
    dst_config_getter: Callable[[], config.Config],
    config_option: str,
    postprocess_function: Callable[[Any], Any] = lambda x: x,
) -> Callable[[click.Context, click.Option, Any], Any]:
    """Helper function for setting the config option from the CLI option handler

    Returns the option handler, that sets, if value is equal to true, the config option to the
    given option value. This is e.g. used to use the CLI to set various configurations temporarily
    from the command line option.

    :param function dst_config_getter: destination config, where the option will be set
    :param str config_option: name of the option that will be set in the runtime config
    :param function postprocess_function: function which will postprocess the value
    :return: handler for the command line interface
    """

    def option_handler(_: click.Context, __: click.Option, value: Any) -> Any:
        """Wrapper handling function

        :param click.Context _: called context of the process
        :param click.Option __: called parameter
        :param object value: given value of the option param
        :return: unchanged value
        """
        if value:
            dst_config_getter().set(config_option, postprocess_function(value))
        return value

    return option_handler


def sizes_callback(_: click.Context, __: click.Option, value: tuple[int, ...]) -> tuple[int, ...]:
    """Checks that the sizes given from the command line are positive

    :param click.Context _: called context of the process
    :param click.Option __: called parameter
    :param tuple value: list of sizes given from the command line
    :return: unchanged list of sizes
    :raises click.BadParameter: if some of the sizes is not positive
    """
    for size in value:
        if size < 1:
            raise click.BadParameter(f"size '{size}' is not a positive integer")
    return value
