"""
Noteful Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for client-correctable failures.
Why:   Routes raise these instead of building error responses inline; the
       handlers registered in main.py turn them into the API's error body:
       {"error": {"message": "..."}}
Who:   Raised by route dependencies and handlers; caught by global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError  → 400 Bad Request (client can fix)
    └── NotFoundError    → 404 Not Found

Store failures are NOT wrapped: SQLAlchemy exceptions propagate unchanged
and the SQLAlchemyError handler answers with an opaque 500.
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when client input fails validation.

    When:    Missing/blank required field on create, empty update payload.
    HTTP:    400 Bad Request

    Example response:
        {"error": {"message": "Missing 'name' in request body"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    @classmethod
    def missing_field(cls, field: str) -> "ValidationError":
        return cls(message=f"Missing '{field}' in request body", field=field)

    @classmethod
    def empty_update(cls, fields: list) -> "ValidationError":
        """Builds the message naming every field an update may carry."""
        quoted = [f"'{f}'" for f in fields]
        if len(quoted) == 1:
            names = quoted[0]
        elif len(quoted) == 2:
            names = f"either {quoted[0]} or {quoted[1]}"
        else:
            names = "either " + ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
        return cls(
            message=f"Request body must contain {names}",
            context={"fields": list(fields)},
        )


class NotFoundError(NotefulError):
    """
    Raised when a requested resource does not exist.

    When:    /folders/{id} or /notes/{id} with an unknown (or malformed) id,
             or a note body referencing an unknown folder.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records (not an exception); the
    existence probe converts that None into this exception.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} doesn't exist", context=ctx)
