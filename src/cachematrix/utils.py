from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from cachematrix.config import IDENTITY_ATOL

if TYPE_CHECKING:
    import numpy.typing as npt


def as_matrix(data: Any) -> npt.NDArray[np.float64]:
    """Convert nested sequences or arrays to a float ndarray."""
    return np.asarray(data, dtype=np.float64)

def is_square(matrix: Any) -> bool:
    """True for a 2-D array with as many rows as columns."""
    array = np.asarray(matrix)
    return array.ndim == 2 and array.shape[0] == array.shape[1]

def is_inverse_of(
    matrix: Any,
    inverse: Any,
    atol: float = IDENTITY_ATOL,
) -> bool:
    """
    Check that two matrices multiply to the identity in both orders.

    :var matrix: The original square matrix.
    :var inverse: The candidate inverse.
    :var atol: Absolute tolerance used for the element-wise comparison.

    :return: True if both ``matrix @ inverse`` and ``inverse @ matrix`` are
             within ``atol`` of the identity, False otherwise (including a
             shape mismatch).

    **Example**:

        is_inverse_of([[2, 0], [0, 2]], [[0.5, 0], [0, 0.5]])
        # Output: True
    """
    a = as_matrix(matrix)
    b = as_matrix(inverse)
    if not (is_square(a) and a.shape == b.shape):
        return False
    identity = np.identity(a.shape[0])
    return bool(
        np.allclose(a @ b, identity, atol=atol)
        and np.allclose(b @ a, identity, atol=atol)
    )
