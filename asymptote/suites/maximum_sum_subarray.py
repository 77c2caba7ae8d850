"""Benchmark of the sliding window solution of the maximum sum of subarray of size k"""
from __future__ import annotations

# Standard Imports
from typing import Optional

# Asymptote Imports
from asymptote.algorithms.sliding_window import maximum_sum_of_subarray_of_size_k
from asymptote.utils.structs import BenchmarkSuite
from asymptote.workload.array_generator import WindowedArray, generate_random_array


def maximum_sum(windowed: WindowedArray) -> Optional[int]:
    """
    :param WindowedArray windowed: array with the size of the window
    :return: maximum sum of the window over the array
    """
    return maximum_sum_of_subarray_of_size_k(windowed.arr, windowed.k)


SUITE = BenchmarkSuite(
    name="Maximum Sum of Subarray of Size K",
    function=maximum_sum,
    generator=generate_random_array,
    sizes=(10, 100, 1000, 10000, 100000, 1000000),
    output_file="maximum-sum-subarray-benchmark.png",
)
