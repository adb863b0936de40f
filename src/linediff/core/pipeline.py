"""Caller-side orchestration: input reading, size ceiling, diff + stats"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from linediff.core.diff import diff_lines, split_lines
from linediff.core.models import EditOp, Stats
from linediff.core.navigation import change_indices
from linediff.core.stats import compute_stats


logger = logging.getLogger(__name__)


class InputTooLargeError(ValueError):
    """Raised when a side exceeds the configured line ceiling."""


@dataclass
class DiffReport:
    """Result of one comparison: merged script, its stats, and positions of its changes."""
    script:  list[EditOp]
    stats:   Stats
    changes: list[int] = field(default_factory=list)


def read_text(path: Path) -> str:
    """Read path as UTF-8 with newlines left untouched. Raises ValueError if unreadable."""
    try:
        return Path(path).read_bytes().decode("utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ValueError(f"{path} is not valid UTF-8 text") from e


def check_size(left: str, right: str, max_lines: int) -> None:
    """Refuse inputs whose line count exceeds max_lines on either side. 0 disables the check."""
    if max_lines == 0:
        return
    for side, text in (("left", left), ("right", right)):
        count = len(split_lines(text))
        if count > max_lines:
            raise InputTooLargeError(
                f"{side} input has {count} lines; the limit is {max_lines} (set max_lines to raise it)"
            )


def run_diff(left: str, right: str, max_lines: int = 0) -> DiffReport:
    """Diff left against right and summarize. Raises InputTooLargeError past the ceiling."""
    check_size(left, right, max_lines)
    script = diff_lines(left, right)
    stats = compute_stats(script)
    logger.info("Diff complete: %s", stats.summary())
    return DiffReport(script=script, stats=stats, changes=change_indices(script))
