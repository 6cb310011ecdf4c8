"""
Building blocks of the solvers: initial conditions, the heat kernel and
Riemann quadrature. Pure NumPy.
"""
