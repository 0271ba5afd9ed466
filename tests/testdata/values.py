from dataclasses import dataclass

from dupindexer import StableContent


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Int:
    value: int


class Text:
    """Owned text wrapper whose clones are counted."""

    clones = 0

    __slots__ = ("content",)

    def __init__(self, content: str):
        self.content = content

    @classmethod
    def from_view(cls, view: str) -> "Text":
        cls.clones += 1
        return cls(str(view))

    def __hash__(self) -> int:
        return hash(self.content)

    def __eq__(self, other) -> bool:
        if isinstance(other, Text):
            return self.content == other.content
        if isinstance(other, str):
            return self.content == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


StableContent.register_content(Text, view_types=(str,), to_owned=Text.from_view)


class Shouting:
    """Clones to upper case, so owned copies disagree with their probes."""

    __slots__ = ("content",)

    def __init__(self, content: str):
        self.content = content

    @classmethod
    def from_view(cls, view: str) -> "Shouting":
        return cls(view.upper())

    def __hash__(self) -> int:
        return hash(self.content)

    def __eq__(self, other) -> bool:
        if isinstance(other, Shouting):
            return self.content == other.content
        if isinstance(other, str):
            return self.content == other
        return NotImplemented


StableContent.register_content(Shouting, view_types=(str,), to_owned=Shouting.from_view)


class Colliding:
    """Distinct values that all share one hash."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __hash__(self) -> int:
        return 7

    def __eq__(self, other) -> bool:
        return isinstance(other, Colliding) and self.value == other.value
