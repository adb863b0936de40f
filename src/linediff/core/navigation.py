"""Jump between non-equal entries of an edit script, wrapping at either end"""

from linediff.core.models import EditOp, Equal


def change_indices(script: list[EditOp]) -> list[int]:
    """Positions of every entry that is not Equal."""
    return [i for i, op in enumerate(script) if not isinstance(op, Equal)]


def next_change(indices: list[int], current: int) -> int:
    """Index after current, wrapping to the first. Unknown current -> first; no changes -> current."""
    if not indices:
        return current
    if current not in indices:
        return indices[0]
    pos = indices.index(current)
    return indices[pos + 1] if pos < len(indices) - 1 else indices[0]


def prev_change(indices: list[int], current: int) -> int:
    """Index before current, wrapping to the last. Unknown current -> last; no changes -> current."""
    if not indices:
        return current
    pos = indices.index(current) if current in indices else -1
    return indices[pos - 1] if pos > 0 else indices[-1]
