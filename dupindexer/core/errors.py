"""Exceptions raised by the indexers."""


class CapabilityError(TypeError):
    """The value type cannot be used with the requested indexer."""


class ContentMismatchError(TypeError):
    """An owned copy does not hash or compare equal to the probe it was made from."""


class FinalizedError(RuntimeError):
    """The indexer was used after its values were handed back to the caller."""


__all__ = ["CapabilityError", "ContentMismatchError", "FinalizedError"]
