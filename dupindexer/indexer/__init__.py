from .dup_indexer import DupIndexer
from .dup_indexer_refs import DupIndexerRefs

__all__ = ["DupIndexer", "DupIndexerRefs"]
