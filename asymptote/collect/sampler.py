"""Sampler measures single invocation of the function under test.

For the given input size, the sampler first generates the input, then (if the capability is
available) asks the garbage collector to clean up, so the baseline of the heap is as tight as
possible, and finally runs the function under test exactly once, while capturing the monotonic
clock and the heap usage before and after the invocation.

There is no warm-up, no repetition of the measurement and no trimming of the outliers: each size
is measured by a single sample. The resulting memory delta might be negative, since some memory
may be collected during the invocation; such values are kept as they are.

The clock, the heap probe and the garbage collection are passed as capabilities, so they can be
substituted, e.g. by deterministic fakes in the tests.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Optional, Protocol
import gc
import time
import tracemalloc

# Third-Party Imports

# Asymptote Imports
from asymptote.utils import log
from asymptote.utils.common.common_kit import BYTES_IN_MEGABYTE, NANOSECONDS_IN_MILLISECOND
from asymptote.utils.structs import (
    FunctionUnderTest,
    InputGenerator,
    InputT,
    MeasurementPoint,
    ResultT,
)

# Monotonic clock returning nanoseconds
Clock = Callable[[], int]
# Optional request of the garbage collection
GarbageCollector = Optional[Callable[[], Any]]

DEFAULT_CLOCK: Clock = time.perf_counter_ns
DEFAULT_GARBAGE_COLLECTOR: GarbageCollector = gc.collect


class HeapProbe(Protocol):
    """Capability of reading the current usage of the heap"""

    def used(self) -> int:
        """
        :return: number of currently used bytes on the heap
        """


class TracedHeap:
    """Heap probe built on top of the tracemalloc module

    Tracing of the allocations is started on the first reading, unless it was already running.
    Only the tracing started by the probe is stopped by :meth:`stop`.

    :ivar bool started: whether the tracing was started by this probe
    """

    __slots__ = ["started"]

    def __init__(self) -> None:
        self.started = False

    def used(self) -> int:
        """Returns the size of currently traced memory blocks

        :return: number of currently used bytes
        """
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self.started = True
        current, _ = tracemalloc.get_traced_memory()
        return current

    def stop(self) -> None:
        """Stops the tracing of the allocations, if it was started by this probe"""
        if self.started:
            tracemalloc.stop()
            self.started = False


def measure(
    size: int,
    generator: InputGenerator[InputT],
    function_under_test: FunctionUnderTest[InputT, ResultT],
    clock: Clock = DEFAULT_CLOCK,
    heap: Optional[HeapProbe] = None,
    collect_garbage: GarbageCollector = DEFAULT_GARBAGE_COLLECTOR,
) -> MeasurementPoint[ResultT]:
    """Measures single invocation of the function under test for the input of given size

    Note that the errors raised either by the generator or by the function under test are not
    handled in any way and are propagated to the caller.

    :param int size: size of the input passed to the generator
    :param function generator: generator of the input of the given size
    :param function function_under_test: measured function taking the generated input
    :param function clock: monotonic clock returning the time in nanoseconds
    :param HeapProbe heap: probe of the heap usage, by default the tracemalloc based probe
    :param function collect_garbage: garbage collection requested before the measurement; if
        set to None, the collection is skipped
    :return: measured point with the result of the function under test
    """
    if heap is None:
        owned_heap = TracedHeap()
        try:
            return measure(size, generator, function_under_test, clock, owned_heap, collect_garbage)
        finally:
            owned_heap.stop()

    function_input = generator(size)

    if collect_garbage is not None:
        collect_garbage()

    heap_before = heap.used()
    start = clock()

    result = function_under_test(function_input)

    end = clock()
    heap_after = heap.used()

    point = MeasurementPoint(
        input_size=size,
        time_ms=(end - start) / NANOSECONDS_IN_MILLISECOND,
        memory_mb=(heap_after - heap_before) / BYTES_IN_MEGABYTE,
        result=result,
    )
    log.msg_to_file(
        f"measured n={size}: {point.time_ms:.4f}ms, {point.memory_mb:.4f}MB", log.VERBOSE_DEBUG
    )
    return point
