"""
The MODEL layer contains pure data structures.
It has NO knowledge of how an inverse is computed.
"""
from cachematrix.model.cached_matrix import CachedMatrix, SynchronizedCachedMatrix

__all__ = ["CachedMatrix", "SynchronizedCachedMatrix"]
