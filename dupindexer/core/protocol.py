import abc
from collections.abc import Hashable
from typing import Any, Callable, ClassVar, Dict, NamedTuple, Protocol, Tuple, Type, TypeVar

from .errors import CapabilityError

T = TypeVar("T")


# Protocol for values accepted by DupIndexer
class Indexable(Protocol):
    # Both must read the value's contents only; identity-based equality breaks deduplication.
    def __hash__(self) -> int:
        ...

    def __eq__(self, other: Any) -> bool:
        ...


def check_indexable(value_type: Type[Any]) -> Type[Any]:
    """Return `value_type` if its instances can be indexed, raise CapabilityError otherwise."""
    if not isinstance(value_type, type):
        raise CapabilityError(f"Expected a type, got {value_type!r}.")
    if not issubclass(value_type, Hashable):
        raise CapabilityError(
            f"{value_type.__name__} is not hashable and cannot be stored in a DupIndexer."
        )
    return value_type


class ContentSpec(NamedTuple):
    """How an owned value type relates to its borrowed content views."""

    owned_type: type
    view_types: Tuple[type, ...]
    to_owned: Callable[[Any], Any]


class StableContent(abc.ABC):
    """
    Capability marker for value types usable with DupIndexerRefs.

    A registered type owns its content in a buffer that lives apart from the
    wrapper object, exposes borrowed views of that content, and guarantees that
    an owned value and a view of equal content hash and compare equal.

    Types are registered with `StableContent.register_content`, which also
    records the view types accepted as probes and the function that clones a
    view into a new owned value. `str` and `bytes` are registered by default.
    """

    _specs: ClassVar[Dict[type, ContentSpec]] = {}

    @classmethod
    def register_content(
        cls,
        owned_type: Type[T],
        view_types: Tuple[type, ...] = (),
        to_owned: Callable[[Any], T] = None,
    ) -> Type[T]:
        check_indexable(owned_type)
        cls.register(owned_type)
        cls._specs[owned_type] = ContentSpec(
            owned_type=owned_type,
            view_types=(owned_type, *view_types),
            to_owned=owned_type if to_owned is None else to_owned,
        )
        return owned_type

    @classmethod
    def spec_for(cls, owned_type: type) -> ContentSpec:
        if isinstance(owned_type, type):
            for klass in owned_type.__mro__:
                spec = cls._specs.get(klass)
                if spec is not None:
                    return spec
        name = getattr(owned_type, "__name__", repr(owned_type))
        raise CapabilityError(
            f"{name} does not have the StableContent capability; "
            "register it with StableContent.register_content."
        )


StableContent.register_content(str)
# only read-only memoryviews are hashable, which is what a borrowed probe needs
StableContent.register_content(bytes, view_types=(memoryview,))


__all__ = ["Indexable", "check_indexable", "ContentSpec", "StableContent"]
