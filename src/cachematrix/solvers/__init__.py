"""
Memoized Inverse Solver
=======================
Returns the cached inverse of a CachedMatrix, or computes and stores it.

Note: This module should be pure Python/NumPy and should NOT configure logging.
"""
from cachematrix.solvers.solver import CACHED_NOTICE, COMPUTING_NOTICE, CacheSolver, solve_inverse

__all__ = ["CACHED_NOTICE", "COMPUTING_NOTICE", "CacheSolver", "solve_inverse"]
