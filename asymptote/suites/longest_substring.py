"""Benchmark of the sliding window solution of the longest substring without repeating characters"""
from __future__ import annotations

# Asymptote Imports
from asymptote.algorithms.sliding_window import length_of_longest_substring
from asymptote.utils.structs import BenchmarkSuite
from asymptote.workload.string_generator import generate_string

SUITE = BenchmarkSuite(
    name="Longest Substring",
    function=length_of_longest_substring,
    generator=generate_string,
    sizes=(1000, 5000, 10000, 50000, 100000),
    output_file="lengthOfLongestSubstring.png",
)
