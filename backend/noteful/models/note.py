"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by NoteService for CRUD operations.

Table Design Rationale:
    - UUID primary key: generated on insert
    - folder_id: plain foreign key to folders.id (no cascade)
    - content: TEXT, no artificial length limit
    - modified: UTC, set on insert and refreshed on every UPDATE
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A note belonging to a folder.

    Query Patterns:
        - List all notes: SELECT * FROM notes
        - Get single note: SELECT ... WHERE id = :uuid (primary key)
        - Notes of a folder: WHERE folder_id = :uuid → idx_notes_folder_id
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    folder_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("folders.id"),
        nullable=False,
    )

    # onupdate also fires for Core update() statements that don't set the column
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )
