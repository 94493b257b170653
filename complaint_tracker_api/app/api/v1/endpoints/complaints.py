"""
API endpoints for complaints.

Users submit complaints and list their own by secret code.  Viewing a
complaint needs only its ID.  Listing every complaint and resolving a
complaint require the admin secret code, checked by the
``AdminAuthority`` injected into ``ComplaintService``.

Submission and resolution answer with a bare status (201 and 204).
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from complaint_tracker_api.app.api.deps import json_body, legacy_operation
from complaint_tracker_api.app.core.security import AdminAuthority, get_admin_authority
from complaint_tracker_api.app.core.store import ComplaintStore, get_store
from complaint_tracker_api.app.schemas.common import ErrorResponse
from complaint_tracker_api.app.schemas.complaint import (
    Complaint,
    ComplaintLookup,
    ResolveComplaintRequest,
)
from complaint_tracker_api.app.schemas.user import SecretCodeRequest
from complaint_tracker_api.app.services.complaint_service import ComplaintService


router = APIRouter()


def get_complaint_service(
    store: ComplaintStore = Depends(get_store),
    authority: AdminAuthority = Depends(get_admin_authority),
) -> ComplaintService:
    return ComplaintService(store, authority)


@legacy_operation(
    router,
    "/submitComplaint",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Submit a complaint",
)
async def submit_complaint(
    complaint: Complaint = Depends(json_body(Complaint)),
    service: ComplaintService = Depends(get_complaint_service),
) -> Response:
    """Store a complaint for the user identified by ``SecretCode``.

    The generated ID is not returned; clients find it through
    ``login`` or ``getAllComplaintsForUser``.
    """
    await service.submit(complaint)
    return Response(status_code=status.HTTP_201_CREATED)


@legacy_operation(
    router,
    "/getAllComplaintsForUser",
    response_model=List[Complaint],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="List a user's complaints",
)
async def get_all_complaints_for_user(
    credentials: SecretCodeRequest = Depends(json_body(SecretCodeRequest)),
    service: ComplaintService = Depends(get_complaint_service),
) -> List[Complaint]:
    """Return the complaint copies held in the user's record.

    The ``resolved`` flag reflects the complaint as it was submitted.
    Use ``viewComplaint`` for the current state.
    """
    return await service.list_for_user(credentials.secret_code)


@legacy_operation(
    router,
    "/getAllComplaintsForAdmin",
    response_model=List[Complaint],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="List every complaint (admin)",
)
async def get_all_complaints_for_admin(
    credentials: SecretCodeRequest = Depends(json_body(SecretCodeRequest)),
    service: ComplaintService = Depends(get_complaint_service),
) -> List[Complaint]:
    return await service.list_for_admin(credentials.secret_code)


@legacy_operation(
    router,
    "/viewComplaint",
    response_model=Complaint,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="View a complaint",
)
async def view_complaint(
    lookup: ComplaintLookup = Depends(json_body(ComplaintLookup)),
    service: ComplaintService = Depends(get_complaint_service),
) -> Complaint:
    return await service.view(lookup.id)


@legacy_operation(
    router,
    "/resolveComplaint",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Resolve a complaint (admin)",
)
async def resolve_complaint(
    body: ResolveComplaintRequest = Depends(json_body(ResolveComplaintRequest)),
    service: ComplaintService = Depends(get_complaint_service),
) -> Response:
    """Mark a complaint as resolved.

    The body carries both the complaint ``id`` and the admin
    ``secretCode``.  Only the canonical complaint changes.
    """
    await service.resolve(body.id, body.secret_code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
