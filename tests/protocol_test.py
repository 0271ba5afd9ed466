import pytest

from dupindexer import CapabilityError, StableContent, check_indexable
from dupindexer.core import ContentSpec


@pytest.mark.parametrize("value_type", [int, str, bytes, tuple, frozenset, float])
def test_hashable_types_are_indexable(value_type):
    assert check_indexable(value_type) is value_type


@pytest.mark.parametrize("value_type", [list, dict, set, bytearray])
def test_unhashable_types_are_rejected(value_type):
    with pytest.raises(CapabilityError):
        check_indexable(value_type)


def test_non_type_rejected():
    with pytest.raises(CapabilityError):
        check_indexable("str")


def test_builtin_stable_content():
    assert issubclass(str, StableContent)
    assert issubclass(bytes, StableContent)
    assert not issubclass(bytearray, StableContent)
    assert StableContent.spec_for(bytes) == ContentSpec(
        owned_type=bytes, view_types=(bytes, memoryview), to_owned=bytes
    )


def test_register_content():
    class Symbol:
        def __init__(self, name):
            self.name = name

        def __hash__(self):
            return hash(self.name)

        def __eq__(self, other):
            return self.name == getattr(other, "name", other)

    assert StableContent.register_content(Symbol, view_types=(str,), to_owned=Symbol) is Symbol
    assert issubclass(Symbol, StableContent)
    spec = StableContent.spec_for(Symbol)
    assert spec.view_types == (Symbol, str)
    assert spec.to_owned("x").name == "x"


def test_register_unhashable_content_rejected():
    class Mutable:
        __hash__ = None

    with pytest.raises(CapabilityError):
        StableContent.register_content(Mutable)
    assert not issubclass(Mutable, StableContent)


def test_spec_for_unregistered():
    with pytest.raises(CapabilityError):
        StableContent.spec_for(int)
    with pytest.raises(CapabilityError):
        StableContent.spec_for("not a type")
