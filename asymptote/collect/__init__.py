"""Collect is a package of measurement routines.

Currently, it contains the sampler, which measures the wall-clock time and the delta of the heap
usage of a single invocation of the function under test.
"""
