"""
Matrix inversion primitive.
Wraps the numpy / scipy inverse behind one function and one error type.
"""
from cachematrix.linalg.inversion import InversionFailure, invert_matrix

__all__ = ["InversionFailure", "invert_matrix"]
