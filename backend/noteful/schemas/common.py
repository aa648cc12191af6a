"""
Noteful Backend — Shared Request/Response Schemas
===================================================

What:  The request-body base class shared by every resource, plus the error
       and health response models.
Why:   Both resources follow the same validation contract; keeping it on one
       base class means the folder and note DTOs only declare their fields.

Request body contract:
    - Every field is Optional so that a missing field reaches our own
      validation (400 with a field-specific message) instead of FastAPI's 422.
    - Unknown fields are dropped on parse and never reach the store.
    - A field is "blank" when it is null or a whitespace-only string.
    - Field names on the wire are the aliases (folderId); storage uses the
      attribute names (folder_id).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RequestBody(BaseModel):
    """Base for per-endpoint request DTOs."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @staticmethod
    def is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    @classmethod
    def wire_fields(cls) -> List[str]:
        """Field names as clients send them, in declaration order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    def first_missing_field(self) -> Optional[str]:
        """
        Wire name of the first blank field in declaration order, or None.

        Used by create endpoints, where every declared field is required.
        """
        for name, field in type(self).model_fields.items():
            if self.is_blank(getattr(self, name)):
                return field.alias or name
        return None

    def supplied_fields(self) -> Dict[str, Any]:
        """
        Non-blank fields keyed by storage (attribute) name.

        Used by update endpoints: only these columns are written.
        """
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if not self.is_blank(getattr(self, name))
        }


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models: Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Example:
        {"error": {"message": "Folder doesn't exist"}}
    """
    error: ErrorDetail

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        return cls(error=ErrorDetail(message=message))


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
