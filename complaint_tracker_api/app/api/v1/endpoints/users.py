"""
User endpoints for API v1.

Registration and login.  A user authenticates by presenting its secret
code in the request body; there are no tokens or sessions.
"""

from fastapi import APIRouter, Depends

from complaint_tracker_api.app.api.deps import json_body, legacy_operation
from complaint_tracker_api.app.core.store import ComplaintStore, get_store
from complaint_tracker_api.app.schemas.common import ErrorResponse
from complaint_tracker_api.app.schemas.user import SecretCodeRequest, User
from complaint_tracker_api.app.services.user_service import UserService


router = APIRouter()


@legacy_operation(
    router,
    "/login",
    response_model=User,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Log in with a secret code",
)
async def login(
    credentials: SecretCodeRequest = Depends(json_body(SecretCodeRequest)),
    store: ComplaintStore = Depends(get_store),
) -> User:
    """Return the full user record, complaints and secret code included."""
    return await UserService(store).login(credentials.secret_code)


@legacy_operation(
    router,
    "/register",
    response_model=User,
    responses={400: {"model": ErrorResponse}},
    summary="Register a new user",
)
async def register(
    user: User = Depends(json_body(User)),
    store: ComplaintStore = Depends(get_store),
) -> User:
    """Register a user and return the stored record.

    Responds 200 rather than 201; existing clients expect it.  The
    generated ``id`` and an empty ``complaints`` list replace whatever
    the payload carried.
    """
    return await UserService(store).register(user)
