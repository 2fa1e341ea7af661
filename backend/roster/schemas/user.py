"""
Roster Backend — Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract for the /users resource.
How:   roster.validation validates raw request bodies against the request
       models; route handlers return the response models and FastAPI
       serializes them and generates the OpenAPI docs from them.

Request shapes:
    CreateUserRequest: every field required
    UpdateUserRequest: the patch, every field independently optional,
                        same constraints as CreateUserRequest when present
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from roster.models.user import Role


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class CreateUserRequest(BaseModel):
    """
    What:  Body of POST /users.
    Who:   Produced by validate_create_user; consumed by UserService.create.

    name and age are strict: "22" is not an age and true is not a number.
    Unknown keys are ignored.
    """
    name: str = Field(min_length=1, strict=True, description="Display name (non-empty)")
    age: int = Field(ge=13, strict=True, description="Age in years (13 or older)")
    role: Role = Field(description="One of TEACHER, STUDENT, ADMIN")


class UpdateUserRequest(BaseModel):
    """
    What:  Body of PATCH /users/{id} (the patch type).
    Who:   Produced by validate_update_user; consumed by UserService.update.

    A field counts as supplied when its key is present with a non-null
    value; `changes()` returns exactly those fields.
    """
    name: Optional[str] = Field(default=None, min_length=1, strict=True)
    age: Optional[int] = Field(default=None, ge=13, strict=True)
    role: Optional[Role] = Field(default=None)

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied with a value, keyed by field name."""
        return {
            field: getattr(self, field)
            for field in self.model_fields_set
            if getattr(self, field) is not None
        }


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """
    What:  Public representation of a user record.
    Who:   Returned by GET /users, GET /users/{id}, POST /users, PATCH /users/{id}.
    """
    id: int = Field(description="Unique user identifier")
    name: str = Field(description="Display name")
    age: int = Field(description="Age in years")
    role: Role = Field(description="TEACHER, STUDENT or ADMIN")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body returned for 400 and 404 responses.

    Example:
        {
            "statusCode": 404,
            "message": "user with that id not found",
            "error": "Not Found"
        }
    """
    statusCode: int = Field(description="HTTP status code")
    message: Union[str, List[str]] = Field(description="One message or one per failed constraint")
    error: Optional[str] = Field(default=None, description="HTTP reason phrase")


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    Who:   Returned by GET /health for container and load balancer health checks.
    """
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    users: int = Field(description="Number of records currently in the store")
    uptime_seconds: float = Field(description="Seconds since service started")
