"""Workload package contains generators of the inputs for the functions under test.

Each generator is a function, which takes the requested size and returns a concrete input of that
size. The generators should be pure functions of the size (modulo the randomness), since their
cost is not measured, but they are called right before each measurement.

Currently, the following generators are supported:

  * :func:`asymptote.workload.string_generator.generate_string`: random strings of letters and
    digits of the given length.
  * :func:`asymptote.workload.array_generator.generate_random_array`: random arrays of small
    integers of the given length, paired with the size of the window (one tenth of the length).
"""
