"""Database table definitions for saved comparisons"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel

from linediff.core.models import Stats


class HistoryEntry(SQLModel, table=True):
    """A saved comparison: both source texts, when it ran, and its stats. The script is never stored."""
    __tablename__ = "history_entries"
    id: Optional[int] = Field(default=None, primary_key=True, description="Monotonically increasing; higher is newer")
    left: str = Field(..., sa_column=Column(Text, nullable=False))
    right: str = Field(..., sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    add: int = Field(default=0, nullable=False)
    delete: int = Field(default=0, nullable=False)
    change: int = Field(default=0, nullable=False)

    @property
    def stats(self) -> Stats:
        return Stats(add=self.add, delete=self.delete, change=self.change)
