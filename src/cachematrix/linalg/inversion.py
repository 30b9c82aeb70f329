from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np
import scipy as sp

from cachematrix.config import DEFAULT_INVERSION_METHOD, INVERSION_METHODS
from cachematrix.utils import as_matrix, is_square

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

__all__ = [
    "InversionFailure",
    "invert_matrix",
]


class InversionFailure(np.linalg.LinAlgError):
    """Raised when a matrix is not square or cannot be inverted."""


def invert_matrix(matrix: Any, method: str = DEFAULT_INVERSION_METHOD) -> npt.NDArray[np.float64]:
    """
    Invert a square matrix using the specified backend.

    Args:
        matrix: Square matrix to invert (ndarray or nested sequences).
        method: 'scipy' (scipy.linalg.inv) or 'numpy' (numpy.linalg.inv).

    Returns:
        The inverse as a float ndarray.

    Raises:
        InversionFailure: If the matrix is not square, is singular or holds
            non-finite values.
        ValueError: If the method is unknown.
    """
    if method not in INVERSION_METHODS:
        raise ValueError(f"Unknown method: {method}")

    A = as_matrix(matrix)
    if not is_square(A):
        raise InversionFailure(f"Matrix must be square (n x n), got shape {A.shape}")

    logger.debug("Inverting %dx%d matrix with %s", A.shape[0], A.shape[1], method)
    try:
        if method == "scipy":
            return sp.linalg.inv(A)
        return np.linalg.inv(A)
    except (np.linalg.LinAlgError, ValueError) as exc:
        # scipy reports non-finite input as ValueError
        raise InversionFailure(f"Matrix is not invertible: {exc}") from exc
