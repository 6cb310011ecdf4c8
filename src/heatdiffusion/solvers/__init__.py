"""
Solver Engine
=============
Infinite-bar convolution, finite-bar eigenfunction expansion and the sampler
that dispatches between them.

Note: This package should be pure Python/NumPy and should NOT import matplotlib.
"""
