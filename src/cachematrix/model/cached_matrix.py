"""
Cached Matrix (Data Model)
==========================
This module defines the container that pairs a matrix with its cached inverse.

Why is this file needed?
------------------------
1. State Management: It holds the current matrix and, once computed, its
   inverse in one place.
2. Invalidation: Replacing the matrix drops the inverse in the same call, so
   there is never a stale inverse next to a newer matrix.
3. Decoupling: The solver reads and writes the inverse slot; the owner only
   ever replaces the matrix.

Classes:
    CachedMatrix: The single-slot container.
    SynchronizedCachedMatrix: The same container guarded by one lock.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional

import numpy as np

logger = logging.getLogger(__name__)


def _empty_matrix() -> np.ndarray:
    """A 1x1 matrix holding NaN, used when no initial matrix is given."""
    return np.full((1, 1), np.nan)


class CachedMatrix:
    """
    Holds one matrix and the optional cached inverse of that matrix.

    The matrix is stored as given: no copy, no shape or invertibility check.
    Those are preconditions of the caller.
    """

    def __init__(self, initial: Any = None) -> None:
        """
        Create a container with no inverse cached.

        Args:
            initial: The matrix to hold. Defaults to a 1x1 NaN matrix.
        """
        self._value = _empty_matrix() if initial is None else initial
        self._inverse: Optional[Any] = None
        self._generation = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(generation={self._generation}, "
            f"cached={self._inverse is not None})"
        )

    @property
    def generation(self) -> int:
        """Number of times the matrix has been replaced."""
        return self._generation

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    def set_value(self, new_matrix: Any) -> None:
        """
        Replace the matrix and drop the cached inverse.

        The inverse is cleared unconditionally, even if ``new_matrix`` equals
        the current matrix.
        """
        self._value = new_matrix
        self._inverse = None
        self._generation += 1
        logger.debug("Matrix replaced, cached inverse cleared (generation %d)", self._generation)

    def get_value(self) -> Any:
        return self._value

    def set_inverse(self, inverse: Any) -> None:
        """
        Store the inverse of the current matrix.

        Nothing checks that ``inverse`` really is the inverse; only the
        solver should call this.
        """
        self._inverse = inverse
        logger.debug("Inverse cached for generation %d", self._generation)

    def get_inverse(self) -> Optional[Any]:
        """Return the cached inverse, or None if not computed for this matrix."""
        return self._inverse


class SynchronizedCachedMatrix(CachedMatrix):
    """
    CachedMatrix whose state changes are serialized by a single re-entrant lock.

    The solver takes the same ``lock`` around its check-compute-store path,
    so the inverse is computed at most once per generation under contention.
    """

    def __init__(self, initial: Any = None) -> None:
        self.lock = threading.RLock()
        super().__init__(initial)

    def set_value(self, new_matrix: Any) -> None:
        with self.lock:
            super().set_value(new_matrix)

    def get_value(self) -> Any:
        with self.lock:
            return super().get_value()

    def set_inverse(self, inverse: Any) -> None:
        with self.lock:
            super().set_inverse(inverse)

    def get_inverse(self) -> Optional[Any]:
        with self.lock:
            return super().get_inverse()
