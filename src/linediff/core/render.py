"""Text renderings of an edit script: unified (one column) and split (two columns)"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from linediff.core.models import Change, Delete, EditOp, Equal, Insert


class ViewMode(str, Enum):
    """How a script is laid out for display"""
    split = "split"
    unified = "unified"


MARKERS = {"equal": " ", "add": "+", "delete": "-", "change": "~"}


@dataclass
class SplitRow:
    """One aligned row of the split view; an absent side has no number and no text."""
    kind:       str
    left_num:   Optional[int]
    left_text:  Optional[str]
    right_num:  Optional[int]
    right_text: Optional[str]


def unified_line(op: EditOp) -> str:
    """Render a single entry with its leading marker."""
    if isinstance(op, Insert):
        return f"+ {op.right}"
    if isinstance(op, Delete):
        return f"- {op.left}"
    if isinstance(op, Change):
        return f"~ {op.left} => {op.right}"
    return f"  {op.left}"


def render_unified(script: list[EditOp]) -> list[str]:
    """One line per entry, in document order."""
    return [unified_line(op) for op in script]


def split_rows(script: list[EditOp]) -> list[SplitRow]:
    """Pair each entry with running left/right line numbers (1-based)."""
    rows = []
    left_num = right_num = 0
    for op in script:
        has_left = isinstance(op, (Equal, Delete, Change))
        has_right = isinstance(op, (Equal, Insert, Change))
        if has_left:
            left_num += 1
        if has_right:
            right_num += 1
        rows.append(SplitRow(
            kind=op.kind,
            left_num=left_num if has_left else None,
            left_text=op.left if has_left else None,
            right_num=right_num if has_right else None,
            right_text=op.right if has_right else None,
        ))
    return rows


def _fit(text: Optional[str], width: int) -> str:
    """Pad or truncate text to exactly width characters; a cut line ends in '~'."""
    text = text or ""
    if len(text) > width:
        return text[:width - 1] + "~"
    return text.ljust(width)


def render_split(script: list[EditOp], width: int = 40) -> list[str]:
    """Two aligned columns: '<marker> <num> <left> | <num> <right>'."""
    lines = []
    for row in split_rows(script):
        left_num = "" if row.left_num is None else str(row.left_num)
        right_num = "" if row.right_num is None else str(row.right_num)
        line = (
            f"{MARKERS[row.kind]} {left_num:>4} {_fit(row.left_text, width)} | "
            f"{right_num:>4} {row.right_text or ''}"
        )
        lines.append(line.rstrip())
    return lines


def render(script: list[EditOp], mode: ViewMode | str = ViewMode.split, width: int = 40) -> list[str]:
    """Render script in the requested view mode."""
    if ViewMode(mode) == ViewMode.unified:
        return render_unified(script)
    return render_split(script, width)
