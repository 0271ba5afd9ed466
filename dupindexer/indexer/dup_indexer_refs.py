"""DupIndexerRefs: deduplication from owned values or borrowed content views."""
from __future__ import annotations

from typing import Any, Type, TypeVar

from ..core import CapabilityError, ContentMismatchError, StableContent
from . import config
from .base import IndexerBase

T = TypeVar("T")


class DupIndexerRefs(IndexerBase[T]):
    """
    Deduplicating indexer for values that can be probed through a borrowed view.

    The value type must have the StableContent capability. Probing with a
    view whose content is already stored returns the existing index without
    creating an owned copy; only content seen for the first time is cloned.
    """

    def __init__(self, value_type: Type[T] = str, capacity: int = 0):
        self._content = StableContent.spec_for(value_type)
        self.value_type = value_type
        super().__init__(capacity)

    @classmethod
    def with_capacity(cls, capacity: int, value_type: Type[T] = str) -> "DupIndexerRefs[T]":
        return cls(value_type=value_type, capacity=capacity)

    def _probe_hash(self, probe: Any) -> int:
        if not isinstance(probe, self._content.view_types):
            accepted = ", ".join(t.__name__ for t in self._content.view_types)
            raise TypeError(
                f"{type(self).__name__}[{self.value_type.__name__}] accepts probes of type "
                f"{accepted}, got {type(probe).__name__}."
            )
        try:
            return hash(probe)
        except (TypeError, ValueError) as err:
            # e.g. a writable memoryview
            raise CapabilityError(
                f"{type(probe).__name__} probe cannot be hashed by {type(self).__name__}: {err}"
            ) from err

    def insert_owned(self, value: T) -> int:
        """
        Inserts an owned value if no value with equal content is stored yet.

        Args:
            value: An instance of `value_type`; it becomes the stored copy when new.

        Returns:
            The index of the stored value with content equal to `value`.
        """
        self._ensure_building()
        if not isinstance(value, self.value_type):
            raise TypeError(
                f"{type(self).__name__} expected {self.value_type.__name__}, "
                f"got {type(value).__name__}."
            )
        value_hash = self._probe_hash(value)
        index = self._find(value, value_hash)
        if index is not None:
            return index
        return self._append(value, value_hash)

    def insert_borrowed(self, view: Any) -> int:
        """
        Inserts the content of a borrowed view, cloning it only when it is new.

        Args:
            view: A view of the content, e.g. a read-only memoryview for bytes.
                The view is not retained.

        Returns:
            The index of the stored value with content equal to `view`.
        """
        self._ensure_building()
        view_hash = self._probe_hash(view)
        index = self._find(view, view_hash)
        if index is not None:
            return index
        owned = self._content.to_owned(view)
        if config.VERIFY_CONTENT:
            self._verify_owned(owned, view, view_hash)
        return self._append(owned, view_hash)

    def _verify_owned(self, owned: Any, view: Any, view_hash: int) -> None:
        if not isinstance(owned, self.value_type):
            raise ContentMismatchError(
                f"Cloning a {type(view).__name__} produced {type(owned).__name__}, "
                f"expected {self.value_type.__name__}."
            )
        if hash(owned) != view_hash or not owned == view:
            raise ContentMismatchError(
                f"{self.value_type.__name__} cloned from {type(view).__name__} does not hash "
                "and compare equal to it; owned values and views must agree on content."
            )
