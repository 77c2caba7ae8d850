"""Array Generator generates random arrays of integers together with the size of the window.

The values of the array are drawn uniformly from the interval ``<-50, 49>``, and the size of the
window is set to one tenth of the length of the array (but at least 1).
"""
from __future__ import annotations

# Standard Imports
from dataclasses import dataclass
import random

# Third-Party Imports

# Asymptote Imports

MIN_VALUE: int = -50
MAX_VALUE: int = 49
WINDOW_RATIO: float = 0.1


@dataclass(frozen=True)
class WindowedArray:
    """Array of integers with the size of the window

    :ivar list arr: the array of integers
    :ivar int k: the size of the window
    """

    __slots__ = ["arr", "k"]

    arr: list[int]
    k: int


def generate_random_array(size: int) -> WindowedArray:
    """Generates the random array of the given length with the window of one tenth of its length

    :param int size: length of the generated array
    :return: random array with the size of the window
    """
    arr = [random.randint(MIN_VALUE, MAX_VALUE) for _ in range(size)]
    return WindowedArray(arr=arr, k=max(1, int(size * WINDOW_RATIO)))
