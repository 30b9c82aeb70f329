"""Memoized matrix inversion: compute an inverse once per matrix and reuse it."""
from cachematrix.linalg import InversionFailure, invert_matrix
from cachematrix.model import CachedMatrix, SynchronizedCachedMatrix
from cachematrix.solvers import CacheSolver, solve_inverse

__all__ = [
    "CacheSolver",
    "CachedMatrix",
    "InversionFailure",
    "SynchronizedCachedMatrix",
    "invert_matrix",
    "solve_inverse",
]

__version__ = "0.1.0"
