"""View is a package of outputs of the benchmark runs.

It contains the report, which prints the measured points and estimated complexities to the
standard output, and the chart, which renders the points into the line chart stored as an image.
"""
