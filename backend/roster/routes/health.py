"""
Roster Backend — Root and Health Check Routes
===============================================

What:  GET / greeting and GET /health liveness check.
Who:   /health is called by container health checks and load balancers.

The store is in-memory, so there are no dependencies to check: the service
is healthy whenever it can answer. The response reports the current number
of users as a cheap sanity signal.
"""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from roster import __version__
from roster.routes.users import get_user_service
from roster.schemas.user import HealthResponse
from roster.services.user_service import UserService

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def index() -> str:
    return "Hello World!"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    users: UserService = Depends(get_user_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        users=len(users),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
