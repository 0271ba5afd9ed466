"""Environment-driven settings for the indexers."""
from __future__ import annotations

import os


def _parse_bool_env(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean-like value.")


# When on, DupIndexerRefs checks that an owned copy cloned from a borrowed probe
# hashes and compares equal to that probe before storing it.
VERIFY_CONTENT = _parse_bool_env("DUPINDEXER_VERIFY_CONTENT", True)
