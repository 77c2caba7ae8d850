"""Algorithms package contains the sample functions under test.

Currently, it contains the sliding window problems, which are used by the registered benchmark
suites to compare the sliding window solutions with their brute force counterparts.
"""
