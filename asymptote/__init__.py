"""Asymptote is a lightweight micro-benchmarking harness for algorithm implementations

Asymptote takes a function under test, a generator of its inputs and a list of input sizes. For
each size it generates one input, measures a single invocation of the function (wall-clock time
and the delta of heap memory) and collects the measured points. The points are then used to
estimate the growth class of both time and memory (constant, linear, nearly-linear or quadratic
and worse), printed as a table and rendered into a line chart stored under the output directory.

The estimation is a heuristic based on the ratios of the metrics between consecutive sizes, and
is meant as a quick sanity check of the expected complexity, not a proof of it.

Asymptote can be used programmatically through :func:`asymptote.logic.runner.run_benchmark` or
from the command line, which runs one of the registered benchmark suites.
"""
from __future__ import annotations

__version__ = "0.3.0"
