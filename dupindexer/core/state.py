from enum import Enum


# lifecycle of an indexer
class IndexerState(Enum):
    BUILDING = 0
    FINALIZED = 1
