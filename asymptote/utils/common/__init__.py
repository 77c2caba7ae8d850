"""Common utils contains modules for common functionality for different submodules

In particular, it includes the shared constants (colours, unit conversions) and helper functions
for working with the filesystem and dynamically loaded modules.
"""
