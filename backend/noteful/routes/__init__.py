# Routes package init
"""
Noteful Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - folders.py: GET/POST   {prefix}/folders
                  GET/PATCH/DELETE {prefix}/folders/{folder_id}
    - notes.py:   GET/POST   {prefix}/notes
                  GET/PATCH/DELETE {prefix}/notes/{note_id}
    - health.py:  GET /health

Design Principle:
    Routes stay THIN: validate the request DTO, call the service, shape the
    response. The {id} existence probe lives in noteful.dependencies.
"""

from uuid import UUID

from fastapi import Request


def location_for(request: Request, row_id: UUID) -> str:
    """The request's own collection path with `/{row_id}` appended."""
    return f"{request.url.path.rstrip('/')}/{row_id}"
