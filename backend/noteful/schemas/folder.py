"""
Noteful Backend — Folder Request/Response Schemas
===================================================

Request DTOs describe what each endpoint accepts; FolderResponse is the only
shape a folder ever leaves the API in, and it always carries sanitized text.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from noteful.models.folder import Folder
from noteful.sanitizer import sanitize
from noteful.schemas.common import RequestBody


class FolderCreate(RequestBody):
    """Body of POST /folders. `name` is required."""
    name: Optional[str] = Field(default=None, description="Folder name")


class FolderUpdate(RequestBody):
    """Body of PATCH /folders/{id}. Only `name` is recognized."""
    name: Optional[str] = Field(default=None, description="New folder name")


class FolderResponse(BaseModel):
    id: uuid.UUID = Field(description="Unique folder identifier (UUID)")
    name: str = Field(description="Folder name, markup escaped")

    @classmethod
    def from_model(cls, folder: Folder) -> "FolderResponse":
        return cls(id=folder.id, name=sanitize(folder.name))
