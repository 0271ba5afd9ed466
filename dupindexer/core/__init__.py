from .errors import CapabilityError, ContentMismatchError, FinalizedError
from .protocol import ContentSpec, Indexable, StableContent, check_indexable
from .state import IndexerState
from .string_format import format_values

__all__ = [
    "Indexable",
    "check_indexable",
    "ContentSpec",
    "StableContent",
    "IndexerState",
    "CapabilityError",
    "ContentMismatchError",
    "FinalizedError",
    "format_values",
]
