"""
Error taxonomy for the complaint tracker.

Every failure a request can meet is one of the exceptions below.  Each
carries the HTTP status code and the message rendered to the client as
``{"error": "<message>"}`` by the handlers registered in ``main``.
None of them is fatal to the process.
"""

from typing import Optional


class ComplaintTrackerError(Exception):
    """Base class for request failures."""

    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DecodeError(ComplaintTrackerError):
    """The request body could not be decoded into the expected payload."""

    status_code = 400
    message = "Malformed request body"


class DuplicateSecretCode(ComplaintTrackerError):
    status_code = 400
    message = "Secret code already in use"


class UserNotFound(ComplaintTrackerError):
    status_code = 404
    message = "User not found"


class ComplaintNotFound(ComplaintTrackerError):
    status_code = 404
    message = "Complaint not found"


class Unauthorized(ComplaintTrackerError):
    """The secret code presented does not grant administrative rights."""

    status_code = 401
    message = "Unauthorized"
