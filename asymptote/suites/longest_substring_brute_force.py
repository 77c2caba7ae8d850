"""Benchmark of the brute force solution of the longest substring without repeating characters

The sizes are smaller than for the sliding window, since the brute force checks all the substrings.
"""
from __future__ import annotations

# Asymptote Imports
from asymptote.algorithms.sliding_window import length_of_longest_substring_brute_force
from asymptote.utils.structs import BenchmarkSuite
from asymptote.workload.string_generator import generate_string

SUITE = BenchmarkSuite(
    name="Longest Substring Brute Force",
    function=length_of_longest_substring_brute_force,
    generator=generate_string,
    sizes=(30, 300, 3000),
    output_file="lengthOfLongestSubstringBruteForce.png",
)
