from typing import Any, Sequence

from tabulate import tabulate

MAX_PRINT_SIZE = 8
SHOW_SIZE = 3


def format_values(values: Sequence[Any]) -> str:
    """
    Render indexed values as an index/value table.

    Sequences longer than MAX_PRINT_SIZE are summarized by their first and
    last SHOW_SIZE entries, with a marker row carrying the total count.
    """
    size = len(values)
    if size <= MAX_PRINT_SIZE:
        rows = [(i, repr(v)) for i, v in enumerate(values)]
    else:
        rows = [(i, repr(values[i])) for i in range(SHOW_SIZE)]
        rows.append(("...", f"(size : {size})"))
        rows.extend((i, repr(values[i])) for i in range(size - SHOW_SIZE, size))
    if not rows:
        return "(empty)"
    return tabulate(rows, headers=["index", "value"], tablefmt="plain")


__all__ = ["format_values", "MAX_PRINT_SIZE", "SHOW_SIZE"]
