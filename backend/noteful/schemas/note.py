"""
Noteful Backend — Note Request/Response Schemas
=================================================

What:  Pydantic models defining the note API contract.
Why:   The wire uses camelCase (`folderId`) while the table uses snake_case
       (`folder_id`); these DTOs own that mapping so neither the routes nor
       the ORM model see the other side's naming.

Sanitization:
    NoteResponse.from_model escapes `name` and `content`. `id`, `folderId`
    and `modified` are not user text and pass through untouched.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from noteful.models.note import Note
from noteful.sanitizer import sanitize
from noteful.schemas.common import RequestBody


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(RequestBody):
    """Body of POST /notes. Fields are validated in this order."""
    name: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body")
    folder_id: Optional[str] = Field(
        default=None,
        alias="folderId",
        description="ID of an existing folder",
    )


class NoteUpdate(RequestBody):
    """Body of PATCH /notes/{id}. Any subset of the fields may be sent."""
    name: Optional[str] = Field(default=None)
    content: Optional[str] = Field(default=None)
    folder_id: Optional[str] = Field(default=None, alias="folderId")


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Full representation of a note.

    Returned by GET /notes (as list items), GET /notes/{id} and POST /notes.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    name: str = Field(description="Note title, markup escaped")
    content: str = Field(description="Note body, markup escaped")
    modified: datetime = Field(description="Last write time (UTC)")
    folder_id: uuid.UUID = Field(alias="folderId", description="Owning folder ID")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_model(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            name=sanitize(note.name),
            content=sanitize(note.content),
            modified=note.modified,
            folder_id=note.folder_id,
        )
