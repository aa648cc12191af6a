"""
Noteful Backend — Folder Route Handlers
=========================================

What:  CRUD endpoints for folders.
How:   Validates the request DTO, delegates to FolderService, returns
       FolderResponse (sanitized) or an empty 204.

Endpoints:
    GET    /folders              → 200 [Folder]
    POST   /folders              → 201 Folder + Location | 400
    GET    /folders/{folder_id}  → 200 Folder | 404
    PATCH  /folders/{folder_id}  → 204 | 400 | 404
    DELETE /folders/{folder_id}  → 204 | 404
"""

from typing import List, Optional

from fastapi import APIRouter, Request, Response

from noteful.dependencies import ExistingFolder, FolderServiceDep, FolderUpdateBody
from noteful.exceptions import ValidationError
from noteful.routes import location_for
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate

router = APIRouter(prefix="/folders", tags=["Folders"])

_NOT_FOUND = {404: {"description": "Folder not found", "model": ErrorResponse}}
_BAD_REQUEST = {400: {"description": "Invalid request body", "model": ErrorResponse}}

# PATCH bodies are read by FolderUpdateBody, so the schema is documented by hand
_UPDATE_BODY_DOC = {
    "requestBody": {"content": {"application/json": {"schema": FolderUpdate.model_json_schema()}}}
}


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(service: FolderServiceDep) -> List[FolderResponse]:
    folders = await service.list_all()
    return [FolderResponse.from_model(folder) for folder in folders]


@router.post(
    "",
    status_code=201,
    response_model=FolderResponse,
    responses={**_BAD_REQUEST},
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    service: FolderServiceDep,
    payload: Optional[FolderCreate] = None,
) -> FolderResponse:
    """
    Create a folder from `{name}`.

    A missing or whitespace-only name is rejected before anything is written.
    """
    payload = payload or FolderCreate()
    missing = payload.first_missing_field()
    if missing:
        raise ValidationError.missing_field(missing)

    folder = await service.insert({"name": payload.name})
    response.headers["Location"] = location_for(request, folder.id)
    return FolderResponse.from_model(folder)


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses={**_NOT_FOUND},
    summary="Get a single folder by ID",
)
async def get_folder(folder: ExistingFolder) -> FolderResponse:
    return FolderResponse.from_model(folder)


@router.delete(
    "/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND},
    summary="Delete a folder",
)
async def delete_folder(folder: ExistingFolder, service: FolderServiceDep) -> Response:
    await service.delete(folder.id)
    return Response(status_code=204)


@router.patch(
    "/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Rename a folder",
    openapi_extra=_UPDATE_BODY_DOC,
)
async def update_folder(
    folder: ExistingFolder,
    service: FolderServiceDep,
    payload: FolderUpdateBody,
) -> Response:
    """Unknown fields are ignored; a blank name counts as not supplied."""
    fields = payload.supplied_fields()
    if not fields:
        raise ValidationError.empty_update(FolderUpdate.wire_fields())

    await service.update(folder.id, fields)
    return Response(status_code=204)
