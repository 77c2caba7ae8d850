"""Deterministic capabilities and helper workloads used in the tests"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Optional

# Third-Party Imports

# Asymptote Imports


class FakeClock:
    """Deterministic clock, which moves forward only when it is advanced

    :ivar int now: current time in nanoseconds
    """

    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, nanoseconds: float) -> None:
        self.now += int(nanoseconds)


class FakeHeap:
    """Deterministic heap probe, which changes only when something is allocated or freed

    :ivar int allocated: number of currently used bytes
    """

    def __init__(self) -> None:
        self.allocated = 0

    def used(self) -> int:
        return self.allocated

    def allocate(self, size: int) -> None:
        self.allocated += size


def costing(
    clock: FakeClock,
    cost: Callable[[int], float],
    heap: Optional[FakeHeap] = None,
    memory: int = 0,
) -> Callable[[Any], int]:
    """Creates function under test, which takes cost(len(input)) nanoseconds on the fake clock

    :param FakeClock clock: clock which is advanced by the function
    :param function cost: cost of the function for the given length of the input
    :param FakeHeap heap: heap which is optionally allocated by the function
    :param int memory: number of bytes allocated per one item of the input
    :return: function under test returning the length of its input
    """

    def function_under_test(function_input: Any) -> int:
        clock.advance(cost(len(function_input)))
        if heap is not None:
            heap.allocate(memory * len(function_input))
        return len(function_input)

    return function_under_test


def list_of(size: int) -> list[int]:
    """Generator of the inputs of given size"""
    return list(range(size))
