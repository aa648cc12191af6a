"""
Noteful Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model representing the `folders` table.
Why:   Folders group notes; every note references exactly one folder.
Who:   Used by FolderService for CRUD operations.

Table Design Rationale:
    - UUID primary key: generated on insert, non-sequential
    - name: free text shown in the sidebar; never blank (enforced by the API)
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """
    A named container for notes.

    Lifecycle:
        Created with a name, renamed in place, deleted by id.
        Deleting a folder that still has notes is left to the store's
        foreign key rules.
    """

    __tablename__ = "folders"

    # Why generic Uuid: native UUID on PostgreSQL, CHAR(32) on SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
