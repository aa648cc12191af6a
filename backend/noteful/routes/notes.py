"""
Noteful Backend — Note Route Handlers
=======================================

What:  CRUD endpoints for notes.
How:   Same shape as the folder routes, plus a folder reference check:
       any `folderId` in a create or update body must name an existing
       folder, otherwise the request is answered with 404 "Folder doesn't
       exist" and nothing is written.

Endpoints:
    GET    /notes            → 200 [Note]
    POST   /notes            → 201 Note + Location | 400 | 404 (unknown folder)
    GET    /notes/{note_id}  → 200 Note | 404
    PATCH  /notes/{note_id}  → 204 | 400 | 404
    DELETE /notes/{note_id}  → 204 | 404
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request, Response

from noteful.dependencies import (
    ExistingNote,
    FolderServiceDep,
    NoteServiceDep,
    NoteUpdateBody,
    find_or_404,
)
from noteful.exceptions import ValidationError
from noteful.routes import location_for
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.folder_service import FolderService

router = APIRouter(prefix="/notes", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note or referenced folder not found", "model": ErrorResponse}}
_BAD_REQUEST = {400: {"description": "Invalid request body", "model": ErrorResponse}}

# PATCH bodies are read by NoteUpdateBody, so the schema is documented by hand
_UPDATE_BODY_DOC = {
    "requestBody": {
        "content": {"application/json": {"schema": NoteUpdate.model_json_schema(by_alias=True)}}
    }
}


async def _resolve_folder_reference(
    folders: FolderService, fields: Dict[str, Any]
) -> Dict[str, Any]:
    """Swap the wire folderId string for the referenced folder's UUID."""
    if "folder_id" in fields:
        folder = await find_or_404(folders, fields["folder_id"])
        fields["folder_id"] = folder.id
    return fields


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(service: NoteServiceDep) -> List[NoteResponse]:
    notes = await service.list_all()
    return [NoteResponse.from_model(note) for note in notes]


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    service: NoteServiceDep,
    folders: FolderServiceDep,
    payload: Optional[NoteCreate] = None,
) -> NoteResponse:
    """
    Create a note from `{name, content, folderId}`.

    Fields are checked in that order and the first missing one is reported.
    """
    payload = payload or NoteCreate()
    missing = payload.first_missing_field()
    if missing:
        raise ValidationError.missing_field(missing)

    fields = await _resolve_folder_reference(folders, payload.supplied_fields())
    note = await service.insert(fields)
    response.headers["Location"] = location_for(request, note.id)
    return NoteResponse.from_model(note)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_NOT_FOUND},
    summary="Get a single note by ID",
)
async def get_note(note: ExistingNote) -> NoteResponse:
    return NoteResponse.from_model(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND},
    summary="Delete a note",
)
async def delete_note(note: ExistingNote, service: NoteServiceDep) -> Response:
    await service.delete(note.id)
    return Response(status_code=204)


@router.patch(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Update some fields of a note",
    openapi_extra=_UPDATE_BODY_DOC,
)
async def update_note(
    note: ExistingNote,
    service: NoteServiceDep,
    folders: FolderServiceDep,
    payload: NoteUpdateBody,
) -> Response:
    """
    Partial update: only the supplied fields are written.

    A body with none of name/content/folderId is rejected with 400.
    """
    fields = payload.supplied_fields()
    if not fields:
        raise ValidationError.empty_update(NoteUpdate.wire_fields())

    fields = await _resolve_folder_reference(folders, fields)
    await service.update(note.id, fields)
    return Response(status_code=204)
