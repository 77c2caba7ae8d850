"""Set of helper function for logging and printing warnings or errors"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Optional
import functools
import logging
import sys
import time
import traceback

# Third-Party Imports
import termcolor

# Asymptote Imports
from asymptote.utils.common.common_kit import AttrChoiceType, ColorChoiceType


VERBOSITY: int = 0
COLOR_OUTPUT: bool = True
CURRENT_INDENT: int = 0

# Enum of verbosity levels
VERBOSE_DEBUG: int = 2
VERBOSE_INFO: int = 1
VERBOSE_RELEASE: int = 0

SUPPRESS_WARNINGS: bool = False


def increase_indent() -> None:
    """Increases the indent for minor and major steps"""
    global CURRENT_INDENT
    CURRENT_INDENT += 1


def decrease_indent() -> None:
    """Decreases the indent for minor and major steps"""
    global CURRENT_INDENT
    CURRENT_INDENT -= 1


def is_verbose_enough(verbosity_peak: int) -> bool:
    """Tests if the current verbosity of the log is enough

    :param int verbosity_peak: peak of the verbosity we are testing
    :return: true if the verbosity is enough
    """
    return VERBOSITY >= verbosity_peak


def _log_msg(
    stream: Callable[[int, str], None], msg: str, msg_verbosity: int, log_level: int
) -> None:
    """
    If the @p msg_verbosity is smaller than the set verbosity of the logging
    module, the @p msg is printed to the log with the given @p log_level

    :param function stream: streaming function of the type void f(log_level, msg)
    :param str msg: message to be logged if certain verbosity is set
    :param int msg_verbosity: level of the verbosity of the message
    :param int log_level: log level of the message
    """
    if msg_verbosity <= VERBOSITY:
        stream(log_level, msg)


def msg_to_stdout(message: str, msg_verbosity: int, log_level: int = logging.INFO) -> None:
    """
    Helper function for the log_msg, prints the @p msg to the stdout,
    if the @p msg_verbosity is smaller or equal to actual verbosity.
    """
    _log_msg(lambda lvl, msg: print(f"{msg}"), message, msg_verbosity, log_level)


def msg_to_file(msg: str, msg_verbosity: int, log_level: int = logging.INFO) -> None:
    """
    Helper function for the log_msg, prints the @p msg to the log,
    if the @p msg_verbosity is smaller or equal to actual verbosity
    """
    _log_msg(logging.log, msg, msg_verbosity, log_level)


def print_current_stack(
    colour: ColorChoiceType = "red", raised_exception: Optional[BaseException] = None
) -> None:
    """Prints the information about stack track leading to an event

    Be default this is used in error traces, so the colour of the printed trace is red.
    Moreover, we filter out some of the events (in particular those outside of asymptote, or
    those that takes care of the actual trace).

    :param str colour: colour of the printed stack trace
    :param Exception raised_exception: exception that was raised before the error
    """
    reduced_trace = []
    trace = (
        traceback.extract_tb(raised_exception.__traceback__)
        if raised_exception
        else traceback.extract_stack()
    )
    for frame in trace:
        filtering_conditions = [
            # We filter frames that are not in asymptote's scope
            "asymptote" not in frame.filename,
            # We filter the first load entry of the module
            frame.name == "<module>",
            # We filter these error and stack handlers ;)
            frame.filename.endswith("log.py") and frame.name in ("error", "print_current_stack"),
        ]
        if not any(filtering_conditions):
            reduced_trace.append(frame)
    print(in_color("".join(traceback.format_list(reduced_trace)), colour), file=sys.stderr)


def write(msg: str, end: str = "\n") -> None:
    """
    :param str msg: info message that will be printed to the standard output
    :param str end: ending of the message
    """
    print(f"{msg}", end=end)


def error(
    msg: str,
    recoverable: bool = False,
    raised_exception: Optional[BaseException] = None,
) -> None:
    """
    :param str msg: error message printed to standard output
    :param bool recoverable: whether we can recover from the error
    :param Exception raised_exception: exception that was raised before the error
    """
    print(f"{tag('error', 'red')} {in_color(msg, 'red')}", file=sys.stderr)
    if is_verbose_enough(VERBOSE_DEBUG):
        print_current_stack(raised_exception=raised_exception)

    # If we cannot recover from this error, we end
    if not recoverable:
        sys.exit(1)


def warn(msg: str, end: str = "\n") -> None:
    """
    :param str msg: warn message printed to standard output
    :param str end: ending of the message
    """
    if not SUPPRESS_WARNINGS:
        print(f"{tag('warning', 'yellow')} {msg}", end=end)


def major_info(msg: str, colour: ColorChoiceType = "blue", no_title: bool = False) -> None:
    """Prints major information, formatted in brackets [], in bold and optionally in color

    :param msg: printed message
    :param no_title: if set to true, then the title will be printed as it is
    :param colour: optional colour
    """
    stripped_msg = msg.strip() if no_title else msg.strip().title()
    printed_msg = "[" + in_color(stripped_msg, colour, attribute_style=["bold"]) + "]"
    newline()
    write(" " * CURRENT_INDENT * 2 + printed_msg)
    newline()


def minor_status(msg: str, status: str = "", sep: str = "-") -> None:
    """Prints minor status containing of two pieces of information: action and its status

    It prints the status of some action, starting with `-` with indent and ending with newline.

    :param msg: printed message, which will be stripped from whitespace and capitalized
    :param status: status of the info
    :param sep: separator used to separate the info with its results
    """
    write(" " * CURRENT_INDENT * 2 + f" - {msg.strip().capitalize()} {sep} {status}")


def minor_info(msg: str, end: str = "\n") -> None:
    """Prints minor information, formatted with indent and starting with -

    Note, that there are some sanitizations happening:
      1. If we want to end the info in new line, we add the punctuations;

    :param msg: printed message, which will be stripped from whitespace and capitalized
    :param end: ending of the message
    """
    msg = msg.strip().capitalize()
    if end == "\n" and msg[-1] not in ".!;":
        msg += "."
    write(" " * CURRENT_INDENT * 2 + f" - {msg}", end)


def tag(tag_str: str, colour: ColorChoiceType) -> str:
    """
    :param tag_str: printed tag
    :param colour: colour of the tag
    :return: formatted tag
    """
    return "[" + in_color(tag_str.upper(), colour, attribute_style=["bold"]) + "]"


def newline() -> None:
    """
    Prints blank line
    """
    print("")


def path_style(path_str: str) -> str:
    """Unified formatting and colouring of the path.

    :param path_str: string that corresponds to path
    :return: stylized path string
    """
    return in_color(path_str, "yellow", attribute_style=["bold"])


def highlight(highlighted_str: str) -> str:
    """Highlights the string

    :param highlighted_str: string that will be highlighted
    :return: highlighted string
    """
    return in_color(highlighted_str, "blue", attribute_style=["bold"])


def in_color(
    output: str, color: ColorChoiceType = "white", attribute_style: Optional[AttrChoiceType] = None
) -> str:
    """Transforms the output to colored version.

    :param str output: the output text that should be colored
    :param str color: the color
    :param str attribute_style: name of the additional style, i.e. bold, italic, etc.

    :return str: the new colored output (if enabled)
    """
    if COLOR_OUTPUT:
        return termcolor.colored(output, color, attrs=attribute_style, force_color=True)
    else:
        return output


def print_elapsed_time(func: Callable[..., Any]) -> Callable[..., Any]:
    """Prints elapsed time after the execution of the wrapped function

    Takes the timestamp before the execution of the function and after the execution and prints
    the elapsed time to the standard output.

    :param function func: function accepting any parameters and returning anything
    :return: function for which we will print the elapsed time
    """

    @functools.wraps(func)
    def inner_wrapper(*args: Any, **kwargs: Any) -> Any:
        """Inner wrapper of the decorated function

        :param list args: original arguments of the function
        :param dict kwargs: original keyword arguments of the function
        :return: results of the decorated function
        """
        before = time.time()
        results = func(*args, **kwargs)
        elapsed = time.time() - before
        minor_status("Elapsed time", status=f"{elapsed:0.2f}s")

        return results

    return inner_wrapper
