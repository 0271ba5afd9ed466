"""State and read access shared by DupIndexer and DupIndexerRefs."""
from __future__ import annotations

import operator
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..core import CapabilityError, FinalizedError, IndexerState, format_values
from .lookup import ContentBuckets

T = TypeVar("T")


def _drain(values: List[T]) -> Iterator[T]:
    # releases each value as soon as it has been yielded
    values.reverse()
    while values:
        yield values.pop()


class IndexerBase(Generic[T]):
    """
    Append-only list of distinct values plus the hash buckets that find them.

    Positions in `_values` are the indices handed out by insertion and never
    change. `_lookup` holds exactly one position per stored value.
    """

    def __init__(self, capacity: int = 0):
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"{type(self).__name__} capacity must be non-negative, got {capacity}.")
        self._capacity_hint = capacity
        self._values: List[T] = []
        self._lookup = ContentBuckets()
        self._state = IndexerState.BUILDING

    @property
    def state(self) -> IndexerState:
        return self._state

    @property
    def capacity(self) -> int:
        """Number of values the indexer was sized for; grows with the values."""
        self._ensure_building()
        return max(self._capacity_hint, len(self._values))

    def _ensure_building(self) -> None:
        if self._state is not IndexerState.BUILDING:
            raise FinalizedError(f"{type(self).__name__} has already been finalized.")

    def _probe_hash(self, probe: Any) -> int:
        try:
            return hash(probe)
        except TypeError as err:
            raise CapabilityError(
                f"{type(probe).__name__} is not hashable and cannot be indexed by "
                f"{type(self).__name__}."
            ) from err

    def _find(self, probe: Any, probe_hash: int) -> Optional[int]:
        return self._lookup.find(self._values, probe, probe_hash)

    def _append(self, value: T, value_hash: int) -> int:
        index = len(self._values)
        self._lookup.add(value_hash, index)
        self._values.append(value)
        return index

    def index_of(self, probe: Any) -> Optional[int]:
        """Return the index of a stored value equal to `probe`, or None."""
        self._ensure_building()
        return self._find(probe, self._probe_hash(probe))

    def __contains__(self, probe: Any) -> bool:
        return self.index_of(probe) is not None

    def __len__(self) -> int:
        self._ensure_building()
        return len(self._values)

    def __getitem__(self, index: int) -> T:
        self._ensure_building()
        index = operator.index(index)
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"{type(self).__name__} index {index} out of range for size {len(self._values)}."
            )
        return self._values[index]

    def __iter__(self) -> Iterator[T]:
        self._ensure_building()
        return iter(self._values)

    def as_tuple(self) -> Tuple[T, ...]:
        """Read-only snapshot of the values in index order."""
        self._ensure_building()
        return tuple(self._values)

    def finalize(self) -> List[T]:
        """Hand the values over to the caller and end the building phase."""
        self._ensure_building()
        values = self._values
        self._values = []
        self._lookup.clear()
        self._state = IndexerState.FINALIZED
        return values

    def finalize_iter(self) -> Iterator[T]:
        """Finalize now and return a one-shot iterator over the values."""
        return _drain(self.finalize())

    def __repr__(self) -> str:
        if self._state is IndexerState.FINALIZED:
            return f"{type(self).__name__}(<finalized>)"
        return f"{type(self).__name__}({dict(enumerate(self._values))!r})"

    def __str__(self) -> str:
        self._ensure_building()
        return format_values(self._values)
