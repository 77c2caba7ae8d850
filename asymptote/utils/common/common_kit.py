"""Set of helper constants and helper functions shared through asymptote"""
from __future__ import annotations

# Standard Imports
from typing import Optional, Iterable, Literal, TYPE_CHECKING
import importlib
import os

# Third-Party Imports

# Asymptote Imports
from asymptote.utils.exceptions import SuppressedExceptions

if TYPE_CHECKING:
    import types

# Types
ColorChoiceType = Literal[
    "black",
    "grey",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "light_grey",
    "dark_grey",
    "light_red",
    "light_green",
    "light_yellow",
    "light_blue",
    "light_magenta",
    "light_cyan",
    "white",
]
AttrChoiceType = Iterable[Literal["bold", "dark", "underline", "blink", "reverse", "concealed"]]

# Report specific
SIZE_COLOUR: ColorChoiceType = "cyan"
HEADER_ATTRS: Optional[AttrChoiceType] = ["bold"]

# Unit conversions
NANOSECONDS_IN_MILLISECOND: int = 1_000_000
BYTES_IN_MEGABYTE: int = 1024 * 1024


def str_to_plural(count: int, verb: str) -> str:
    """Helper function that returns the plural of the string if count is more than 1

    :param int count: number of the verbs
    :param str verb: name of the verb we are creating a plural for
    """
    return str(count) + " " + (verb + "s" if count != 1 else verb)


def touch_dir(touched_dir: str) -> None:
    """
    Touches directory, i.e. if it exists it does nothing and
    if the directory does not exist, then it creates it.

    The directory might be created by someone else between the check and the creation,
    in which case the error is ignored.

    :param str touched_dir: path that will be touched
    """
    if not os.path.exists(touched_dir):
        with SuppressedExceptions(FileExistsError):
            os.makedirs(touched_dir)


def safe_division(dividend: float, divisor: float, approx_zero: float) -> float:
    """Safe division of dividend by operand

    Non-positive divisors are replaced by the approximated zero.

    :param number dividend: upper operand of the division
    :param number divisor: lower operand of the division, may be zero or negative
    :param number approx_zero: small positive number used instead of the non-positive divisor
    :return: safe value after division of approximated zero
    """
    return dividend / (divisor if divisor > 0 else approx_zero)


def get_module(module_name: str) -> types.ModuleType:
    """Finds module by its name.

    :param str module_name: dynamically load a module (but first check the cache)
    :return: loaded module
    """
    if module_name not in MODULE_CACHE.keys():
        MODULE_CACHE[module_name] = importlib.import_module(module_name)
    return MODULE_CACHE[module_name]


MODULE_CACHE: dict[str, types.ModuleType] = {}
