from .core import (
    CapabilityError,
    ContentMismatchError,
    FinalizedError,
    Indexable,
    IndexerState,
    StableContent,
    check_indexable,
)
from .indexer import DupIndexer, DupIndexerRefs

__all__ = [
    # indexer/dup_indexer.py
    "DupIndexer",
    # indexer/dup_indexer_refs.py
    "DupIndexerRefs",
    # core/state.py
    "IndexerState",
    # core/protocol.py
    "Indexable",
    "StableContent",
    "check_indexable",
    # core/errors.py
    "CapabilityError",
    "ContentMismatchError",
    "FinalizedError",
]
