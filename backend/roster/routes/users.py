"""
Roster Backend — Users Route Handlers
=======================================

What:  CRUD endpoints for the /users resource.
How:   Each handler validates its inputs with roster.validation, makes exactly
       one UserService call and shapes the HTTP response. No business rules
       live here.
Who:   The UserService instance is the one owned by the app (app.state),
       handed to each handler by the get_user_service dependency.

Endpoints:
    GET    /users        → list
    GET    /users/{id}   → get (200 with empty body when missing)
    POST   /users        → create (201)
    PATCH  /users/{id}   → update (404 when missing)
    DELETE /users/{id}   → delete (200, empty body, even when missing)
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status

from roster.schemas.user import ErrorResponse, UserResponse
from roster.services.user_service import UserService
from roster.validation import (
    parse_user_id,
    validate_create_user,
    validate_update_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(request: Request) -> UserService:
    """Dependency returning the store owned by the running application."""
    return request.app.state.user_service


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List all users",
)
async def list_users(
    users: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    return [UserResponse.model_validate(user) for user in users.list()]


@router.get(
    "/{user_id}",
    response_model=Optional[UserResponse],
    responses={
        200: {"description": "The user, or an empty body if no user has this id"},
        400: {"description": "Id is not an integer", "model": ErrorResponse},
    },
    summary="Get a single user by ID",
)
async def get_user(
    user_id: str,
    users: UserService = Depends(get_user_service),
):
    """
    Return one user.

    A missing id is not an error here: the response is 200 with no body.
    """
    user = users.get(parse_user_id(user_id))
    if user is None:
        return Response(status_code=status.HTTP_200_OK)
    return UserResponse.model_validate(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid body", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    payload: Any = Body(default=None),
    users: UserService = Depends(get_user_service),
) -> UserResponse:
    request = validate_create_user(payload)
    return UserResponse.model_validate(users.create(request))


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid id or body", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Update some fields of a user",
)
async def update_user(
    user_id: str,
    payload: Any = Body(default=None),
    users: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Partially update a user.

    Only the fields present in the body change. An empty body is a valid
    patch that changes nothing.
    """
    target = parse_user_id(user_id)
    patch = validate_update_user({} if payload is None else payload)
    return UserResponse.model_validate(users.update(target, patch))


@router.delete(
    "/{user_id}",
    response_class=Response,
    responses={
        200: {"description": "Deleted (or already absent); empty body"},
        400: {"description": "Id is not an integer", "model": ErrorResponse},
    },
    summary="Delete a user",
)
async def delete_user(
    user_id: str,
    users: UserService = Depends(get_user_service),
) -> Response:
    users.delete(parse_user_id(user_id))
    return Response(status_code=status.HTTP_200_OK)
