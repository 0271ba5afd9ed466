"""Shared test-only value types.

Centralizing them lets the DupIndexer and DupIndexerRefs tests exercise the
same tagged values, counted clones and hash collisions.
"""

from .values import Colliding, Int, Shouting, Str, Text

__all__ = ["Str", "Int", "Text", "Shouting", "Colliding"]
