"""
Noteful Backend — Route Dependencies
======================================

What:  FastAPI dependencies that build services and run the existence probe.
Why:   Every /{id} route must answer 404 before doing anything else. Running the
       probe as a dependency hands the terminal handler a typed `Folder` or
       `Note` instead of stashing the row on the request.
How:   FastAPI caches dependencies per request, so the service instance that
       ran the probe is the same one the handler receives.

Type aliases (for handler signatures):
    FolderServiceDep / NoteServiceDep  → per-request service
    ExistingFolder / ExistingNote      → row loaded from the {id} path segment
    FolderUpdateBody / NoteUpdateBody  → PATCH body, decoded after the probe
"""

from typing import Annotated, Optional, Type, TypeVar
from uuid import UUID

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import NotFoundError
from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.schemas.common import RequestBody
from noteful.schemas.folder import FolderUpdate
from noteful.schemas.note import NoteUpdate
from noteful.services.base import ModelT, ResourceService
from noteful.services.folder_service import FolderService
from noteful.services.note_service import NoteService

BodyT = TypeVar("BodyT", bound=RequestBody)


def parse_id(raw: Optional[str]) -> Optional[UUID]:
    """UUID from a path segment or body field; None if it isn't one."""
    try:
        return UUID(str(raw))
    except ValueError:
        return None


async def find_or_404(service: ResourceService[ModelT], raw_id: Optional[str]) -> ModelT:
    """
    The existence probe.

    A malformed id can't match any row, so it gets the same 404 as an
    unknown one rather than a type error.
    """
    row_id = parse_id(raw_id)
    row = await service.get_by_id(row_id) if row_id is not None else None
    if row is None:
        raise NotFoundError(resource=service.resource_name, resource_id=raw_id)
    return row


# ── Services ──────────────────────────────────────────────────────────────
async def get_folder_service(db: AsyncSession = Depends(get_db_session)) -> FolderService:
    return FolderService(db)


async def get_note_service(db: AsyncSession = Depends(get_db_session)) -> NoteService:
    return NoteService(db)


FolderServiceDep = Annotated[FolderService, Depends(get_folder_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]


# ── Existence probes for /{id} routes ─────────────────────────────────────
async def get_existing_folder(folder_id: str, service: FolderServiceDep) -> Folder:
    return await find_or_404(service, folder_id)


async def get_existing_note(note_id: str, service: NoteServiceDep) -> Note:
    return await find_or_404(service, note_id)


ExistingFolder = Annotated[Folder, Depends(get_existing_folder)]
ExistingNote = Annotated[Note, Depends(get_existing_note)]


# ── Update bodies, read only after the existence probe ────────────────────
async def read_body(request: Request, model: Type[BodyT]) -> BodyT:
    """
    Decode the JSON body into `model`.

    Used instead of a plain body parameter on PATCH routes: FastAPI decodes
    declared bodies before any dependency runs, so a malformed body would
    otherwise answer 400 for an id that doesn't exist.

    Raises:
        RequestValidationError: body isn't JSON or a field has the wrong type
    """
    raw = await request.body()
    if not raw.strip():
        return model()
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        raise RequestValidationError(errors) from e


async def get_folder_update(folder: ExistingFolder, request: Request) -> FolderUpdate:
    return await read_body(request, FolderUpdate)


async def get_note_update(note: ExistingNote, request: Request) -> NoteUpdate:
    return await read_body(request, NoteUpdate)


FolderUpdateBody = Annotated[FolderUpdate, Depends(get_folder_update)]
NoteUpdateBody = Annotated[NoteUpdate, Depends(get_note_update)]
