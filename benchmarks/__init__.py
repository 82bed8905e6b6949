"""Performance benchmarks for spgkit.

This package contains microbenchmarks for hot paths in the library,
including the vector algebra kernels and full SPG solves.
"""
