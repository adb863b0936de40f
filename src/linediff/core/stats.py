"""Summary statistics over a finished edit script"""

from linediff.core.models import Change, Delete, EditOp, Insert, Stats


def compute_stats(script: list[EditOp]) -> Stats:
    """Count add/delete/change entries. Equal entries are ignored; an empty script yields zeros."""
    add = delete = change = 0
    for op in script:
        if isinstance(op, Insert):
            add += 1
        elif isinstance(op, Delete):
            delete += 1
        elif isinstance(op, Change):
            change += 1
    return Stats(add=add, delete=delete, change=change)
