"""Line-based LCS diff: table construction, backtrace, and delete/insert merging"""

import logging

from linediff.core.models import Change, Delete, EditOp, Equal, Insert


logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text strictly on '\\n'. The empty string has no lines; a trailing newline yields a trailing ''."""
    if not text:
        return []
    return text.split("\n")


def lcs_table(a: list[str], b: list[str]) -> list[int]:
    """Return the (len(a)+1) x (len(b)+1) LCS length table as a flat row-major list.

    Cell (i, j) lives at i * (len(b) + 1) + j and holds the LCS length of a[:i] and b[:j].
    """
    width = len(b) + 1
    dp = [0] * ((len(a) + 1) * width)
    for i in range(1, len(a) + 1):
        row, prev = i * width, (i - 1) * width
        line = a[i - 1]
        for j in range(1, width):
            if line == b[j - 1]:
                dp[row + j] = dp[prev + j - 1] + 1
            else:
                up, left = dp[prev + j], dp[row + j - 1]
                dp[row + j] = up if up >= left else left
    return dp


def backtrace(a: list[str], b: list[str], dp: list[int]) -> list[EditOp]:
    """Walk the LCS table from (len(a), len(b)) back to the origin.

    Ties between stepping up and stepping left resolve to Delete. Returns the raw,
    unmerged script in document order.
    """
    width = len(b) + 1
    script: list[EditOp] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            script.append(Equal(left=a[i - 1], right=b[j - 1]))
            i -= 1
            j -= 1
        elif dp[(i - 1) * width + j] >= dp[i * width + j - 1]:
            script.append(Delete(left=a[i - 1]))
            i -= 1
        else:
            script.append(Insert(right=b[j - 1]))
            j -= 1
    while i > 0:
        script.append(Delete(left=a[i - 1]))
        i -= 1
    while j > 0:
        script.append(Insert(right=b[j - 1]))
        j -= 1
    script.reverse()
    return script


def merge_changes(script: list[EditOp]) -> list[EditOp]:
    """Collapse each Delete immediately followed by an Insert into a single Change.

    Single pass with one entry of lookahead; runs pair up strictly by position.
    """
    merged: list[EditOp] = []
    k = 0
    while k < len(script):
        op = script[k]
        nxt = script[k + 1] if k + 1 < len(script) else None
        if isinstance(op, Delete) and isinstance(nxt, Insert):
            merged.append(Change(left=op.left, right=nxt.right))
            k += 2
        else:
            merged.append(op)
            k += 1
    return merged


def diff_lines(left: str, right: str) -> list[EditOp]:
    """Return the merged edit script turning left into right, in document order."""
    a, b = split_lines(left), split_lines(right)
    logger.debug("Diffing %d x %d lines", len(a), len(b))
    script = merge_changes(backtrace(a, b, lcs_table(a, b)))
    logger.debug("Produced %d edit entries", len(script))
    return script


def left_lines(script: list[EditOp]) -> list[str]:
    """Left-side lines of a script, in order (reconstructs the left line sequence)."""
    return [op.left for op in script if not isinstance(op, Insert)]


def right_lines(script: list[EditOp]) -> list[str]:
    """Right-side lines of a script, in order (reconstructs the right line sequence)."""
    return [op.right for op in script if not isinstance(op, Delete)]
