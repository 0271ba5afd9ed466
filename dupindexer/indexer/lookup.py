"""Hash-bucket lookup that resolves equality against the owning value list."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


class ContentBuckets:
    """
    Maps a content hash to the positions of stored values carrying that hash.

    The buckets never hold the values themselves. A probe is matched by
    walking the candidate positions of its hash and comparing it against the
    value stored at each position, so the value list stays the sole owner.
    """

    __slots__ = ("_buckets", "_size")

    def __init__(self):
        self._buckets: Dict[int, List[int]] = {}
        self._size = 0

    def find(self, values: Sequence[Any], probe: Any, probe_hash: int) -> Optional[int]:
        candidates = self._buckets.get(probe_hash)
        if candidates is None:
            return None
        for position in candidates:
            stored = values[position]
            if stored is probe or stored == probe:
                return position
        return None

    def add(self, value_hash: int, position: int) -> None:
        bucket = self._buckets.get(value_hash)
        if bucket is None:
            self._buckets[value_hash] = [position]
        else:
            # hash collision between distinct values
            bucket.append(position)
        self._size += 1

    def clear(self) -> None:
        self._buckets = {}
        self._size = 0

    @property
    def num_buckets(self) -> int:
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size
