from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from cachematrix.linalg.inversion import invert_matrix

if TYPE_CHECKING:
    from cachematrix.model.cached_matrix import CachedMatrix

logger = logging.getLogger(__name__)

CACHED_NOTICE = "Getting cached inverse matrix"
COMPUTING_NOTICE = "Calculating inverse matrix. Please be patient."

Notify = Callable[[str], None]


def _log_notice(message: str) -> None:
    logger.info(message)


def solve_inverse(
    container: CachedMatrix,
    *,
    invert: Callable[..., Any] = invert_matrix,
    notify: Optional[Notify] = None,
    **invert_kwargs: Any,
) -> Any:
    """
    Return the inverse of the matrix held by ``container``.

    A cached inverse is returned as is. Otherwise the inverse is computed
    with ``invert`` and stored in the container before being returned.
    Errors raised by ``invert`` propagate unchanged and leave the container
    untouched.

    Args:
        container: The CachedMatrix to solve.
        invert: The inversion primitive, called as ``invert(matrix, **invert_kwargs)``.
        notify: Sink for the cache hit/miss notices. Defaults to logging at INFO.
        **invert_kwargs: Extra options for the primitive (e.g. ``method="numpy"``).

    Returns:
        The inverse matrix.
    """
    notify = notify or _log_notice

    # Containers that carry a lock are solved under it
    lock = getattr(container, "lock", None)
    with lock if lock is not None else contextlib.nullcontext():
        inverse = container.get_inverse()
        if inverse is not None:
            notify(CACHED_NOTICE)
            return inverse

        notify(COMPUTING_NOTICE)
        matrix = container.get_value()
        inverse = invert(matrix, **invert_kwargs)
        container.set_inverse(inverse)
        return inverse


class CacheSolver:
    """
    Reusable memoized solver bound to one inversion primitive and notice sink.
    """

    def __init__(
        self,
        invert: Callable[..., Any] = invert_matrix,
        notify: Optional[Notify] = None,
        **invert_kwargs: Any,
    ) -> None:
        """
        Initialize the solver.

        Args:
            invert: The inversion primitive.
            notify: Optional sink for notices.
            **invert_kwargs: Options forwarded to the primitive on every solve.
        """
        self.invert = invert
        self.notify = notify
        self.invert_kwargs = invert_kwargs

        self.hits = 0
        self.misses = 0

    def _counting_notify(self, message: str) -> None:
        if message == CACHED_NOTICE:
            self.hits += 1
        else:
            self.misses += 1
        (self.notify or _log_notice)(message)

    def solve(self, container: CachedMatrix) -> Any:
        return solve_inverse(
            container,
            invert=self.invert,
            notify=self._counting_notify,
            **self.invert_kwargs,
        )

    __call__ = solve
