"""
Roster Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the two failure kinds the API reports.
How:   Each exception carries a message, an HTTP status code and an error label.
       Global exception handlers (registered in main.py) turn them into the
       JSON error body `{"statusCode": ..., "message": ..., "error": ...}`.
Who:   ValidationError is raised by roster.validation; NotFoundError by
       UserService.update. Both are caught by the global handlers.

Exception Hierarchy:
    RosterError (base)
    ├── ValidationError   → 400 Bad Request (client can fix the input)
    └── NotFoundError     → 404 Not Found
"""

from typing import Any, Dict, List, Optional, Union


class RosterError(Exception):
    """
    Base exception for all Roster application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
        error:        Short HTTP reason phrase placed in the response body
    """

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(
        self,
        message: Any = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(str(self.message))

    def to_response(self) -> Dict[str, Any]:
        """Body of the JSON error response for this exception."""
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "error": self.error,
        }


class ValidationError(RosterError):
    """
    Raised when client input fails validation.

    `message` is either a single string (e.g. a path parameter that is not
    an integer) or a list of strings, one per failed constraint in a body.

    Example response:
        {
            "statusCode": 400,
            "message": ["age must not be less than 13"],
            "error": "Bad Request"
        }
    """

    status_code = 400
    error = "Bad Request"

    def __init__(
        self,
        message: Union[str, List[str]] = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @property
    def messages(self) -> List[str]:
        """The failure messages, always as a list."""
        if isinstance(self.message, list):
            return list(self.message)
        return [self.message]


class NotFoundError(RosterError):
    """
    Raised when an operation references a user id that is not in the store.

    When:    PATCH /users/{id} with an unknown id.
    HTTP:    404 Not Found
    """

    status_code = 404
    error = "Not Found"

    def __init__(
        self,
        message: str = "user with that id not found",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id
