"""Postprocess is a package of routines that interpret the measured points.

Currently, it contains the growth estimator, which classifies the growth of time and memory into
coarse complexity classes.
"""
