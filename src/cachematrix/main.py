"""
Demonstration Run
=================
Walks a CachedMatrix through one full lifecycle and logs what happens.

Why is this file needed?
------------------------
It acts as the composition root for a manual check. It:
1. Sets up logging (console).
2. Computes an inverse, then fetches it again from the cache.
3. Replaces the matrix and shows the inverse being recomputed.
4. Shows a singular matrix failing without touching the cache.
"""
import logging

import numpy as np

from cachematrix.linalg import InversionFailure
from cachematrix.logging_config import setup_logging
from cachematrix.model import CachedMatrix
from cachematrix.solvers import solve_inverse
from cachematrix.utils import is_inverse_of

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()

    matrix = np.array([[2.0, 0.0], [0.0, 2.0]])
    cached = CachedMatrix(matrix)

    inverse = solve_inverse(cached)
    logger.info("Inverse:\n%s", inverse)
    logger.info("Verification (A · A⁻¹ = I): %s", is_inverse_of(matrix, inverse))

    solve_inverse(cached)

    cached.set_value(np.identity(2))
    logger.info("Inverse after replacement:\n%s", solve_inverse(cached))

    cached.set_value(np.array([[1.0, 2.0], [2.0, 4.0]]))
    try:
        solve_inverse(cached)
    except InversionFailure as exc:
        logger.warning("Inversion failed: %s (cached: %s)", exc, cached.has_inverse)


if __name__ == "__main__":
    main()
