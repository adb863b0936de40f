"""Comparison history persistence: save, prune, list, lookup, clear, and re-diff"""

import logging

from sqlmodel import Session, select

from linediff.core.diff import diff_lines
from linediff.core.models import EditOp, Stats
from linediff.crud.models import HistoryEntry


logger = logging.getLogger(__name__)


def get_entry(session: Session, entry_id: int) -> HistoryEntry:
    """Return the entry with entry_id. Raises ValueError if it does not exist."""
    entry = session.get(HistoryEntry, entry_id)
    if entry is None:
        raise ValueError(f"History entry {entry_id} not found")
    return entry


def list_entries(session: Session, limit: int | None = None) -> list[HistoryEntry]:
    """Return entries newest first, optionally capped at limit."""
    stmt = select(HistoryEntry).order_by(HistoryEntry.id.desc())
    if limit:
        stmt = stmt.limit(limit)
    return list(session.exec(stmt).all())


def prune_entries(session: Session, max_entries: int) -> int:
    """Delete the oldest entries beyond max_entries. Returns count deleted. No-op if max_entries=0."""
    if max_entries == 0:
        return 0

    entries = list_entries(session)
    excess = entries[max_entries:]
    for entry in excess:
        session.delete(entry)
    session.flush()

    if excess:
        logger.debug("Pruned %d history entries", len(excess))
    return len(excess)


def save_entry(session: Session, left: str, right: str, stats: Stats, max_entries: int = 10) -> HistoryEntry:
    """Record a comparison, then prune to the newest max_entries.

    Flushes but does not commit; caller controls the transaction.
    """
    entry = HistoryEntry(left=left, right=right, add=stats.add, delete=stats.delete, change=stats.change)
    session.add(entry)
    session.flush()

    if max_entries > 0:
        prune_entries(session, max_entries)

    return entry


def clear_history(session: Session) -> int:
    """Delete every entry. Returns count deleted."""
    entries = session.exec(select(HistoryEntry)).all()
    for entry in entries:
        session.delete(entry)
    session.flush()
    return len(entries)


def rediff_entry(session: Session, entry_id: int) -> list[EditOp]:
    """Recompute the edit script from an entry's stored texts."""
    entry = get_entry(session, entry_id)
    return diff_lines(entry.left, entry.right)
