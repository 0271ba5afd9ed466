"""DupIndexer: dense, first-occurrence indices for arbitrary hashable values."""
from __future__ import annotations

import warnings
from typing import Optional, Type, TypeVar

import chex
import jax.numpy as jnp

from ..core import check_indexable
from .base import IndexerBase
from .batch import (
    INDEX_DTYPE,
    first_occurrence_groups,
    has_nan,
    representatives,
    to_batch_array,
)

T = TypeVar("T")


class DupIndexer(IndexerBase[T]):
    """
    Deduplicating indexer for hashable values.

    Every distinct value is stored once, in the order it was first inserted,
    and is identified by its position. Inserting a value equal to one already
    stored returns the existing position and stores nothing.

    Attributes:
        value_type: Optional type every inserted value is expected to be.
            Checked for hashability when the indexer is built.
    """

    def __init__(self, value_type: Optional[Type[T]] = None, capacity: int = 0):
        if value_type is not None:
            check_indexable(value_type)
        self.value_type = value_type
        super().__init__(capacity)

    @classmethod
    def with_capacity(cls, capacity: int, value_type: Optional[Type[T]] = None) -> "DupIndexer[T]":
        """
        Creates an empty indexer sized for `capacity` distinct values.

        Args:
            capacity: Expected number of distinct values. Only a sizing hint.
            value_type: Optional type of the values to be inserted.

        Returns:
            A new, empty DupIndexer.
        """
        return cls(value_type=value_type, capacity=capacity)

    def insert(self, value: T) -> int:
        """
        Inserts `value` if no equal value is stored yet.

        Args:
            value: The value to index. It becomes the stored copy when it is new.

        Returns:
            The index of the stored value equal to `value`.
        """
        self._ensure_building()
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise TypeError(
                f"{type(self).__name__} expected {self.value_type.__name__}, "
                f"got {type(value).__name__}."
            )
        value_hash = self._probe_hash(value)
        index = self._find(value, value_hash)
        if index is not None:
            return index
        return self._append(value, value_hash)

    def insert_batch(self, values: chex.Array) -> chex.Array:
        """
        Inserts a 1-D array of numeric scalars.

        Distinct values are inserted in the order they first appear in the
        batch, so the result matches calling `insert` on every element.

        Args:
            values: A 1-D JAX or NumPy array.

        Returns:
            An int32 array with the index of every element of `values`.

        Raises:
            ValueError: If `values` is not 1-D, or if converting it to a JAX
                array would change an element (int64/float64 input while
                jax_enable_x64 is off).
        """
        self._ensure_building()
        values = to_batch_array(values)
        if values.ndim != 1:
            raise ValueError(
                f"{type(self).__name__}.insert_batch expects a 1-D array, got shape {values.shape}."
            )
        if values.shape[0] == 0:
            return jnp.zeros((0,), dtype=INDEX_DTYPE)
        if has_nan(values):
            warnings.warn(
                "insert_batch received NaN; NaN never compares equal, "
                "so it is indexed anew by every batch.",
                RuntimeWarning,
                stacklevel=2,
            )
        first_positions, groups = first_occurrence_groups(values)
        assigned = [self.insert(v) for v in representatives(values, first_positions)]
        return jnp.asarray(assigned, dtype=INDEX_DTYPE)[groups]
