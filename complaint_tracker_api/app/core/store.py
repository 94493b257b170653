"""
In‑memory store for users and complaints.

``ComplaintStore`` owns the two tables and the single lock that
serializes every operation on them.  Users are keyed by secret code,
complaints by ID.  Each public method holds the lock from validation
through mutation and returns detached copies, so callers can encode a
result after the lock is released without ever seeing a half‑updated
user‑plus‑complaint pair.

Two historical behaviours are kept on purpose:

* IDs for both users and complaints are ``len(complaints) + 1``.  The
  first user and the first complaint therefore both get ``"1"``; the
  tables are separate namespaces.
* A user's ``complaints`` list holds copies taken at submission time.
  Resolving a complaint updates only the canonical entry, so the copy
  inside the user record keeps ``resolved == False``.

One store is created per application and exposed to routes through
the ``get_store`` dependency.
"""

import logging
import threading
from typing import Dict, List

from fastapi import Request

from .errors import ComplaintNotFound, DuplicateSecretCode, UserNotFound
from ..schemas.complaint import Complaint
from ..schemas.user import User


logger = logging.getLogger(__name__)


class ComplaintStore:
    """Users and complaints tables guarded by one exclusive lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}
        self._complaints: Dict[str, Complaint] = {}

    def _next_id(self) -> str:
        # Derived from the complaints table size for users too.
        return str(len(self._complaints) + 1)

    def _user(self, secret_code: str) -> User:
        user = self._users.get(secret_code)
        if user is None:
            raise UserNotFound()
        return user

    def register(self, user: User) -> User:
        """Store a new user and return the stored record.

        Raises
        ------
        DuplicateSecretCode
            If another user already holds ``user.secret_code``.
        """
        with self._lock:
            if user.secret_code in self._users:
                raise DuplicateSecretCode()
            stored = user.model_copy(update={"id": self._next_id(), "complaints": []}, deep=True)
            self._users[stored.secret_code] = stored
            logger.info("Registered user %s", stored.id)
            return stored.model_copy(deep=True)

    def get_user(self, secret_code: str) -> User:
        """Return the full stored record for ``secret_code``."""
        with self._lock:
            return self._user(secret_code).model_copy(deep=True)

    def add_complaint(self, complaint: Complaint) -> Complaint:
        """Store a complaint canonically and append a copy to its owner.

        The complaint always starts unresolved.  If the owner is unknown
        neither table is touched.
        """
        with self._lock:
            owner = self._user(complaint.secret_code)
            stored = complaint.model_copy(update={"id": self._next_id(), "resolved": False}, deep=True)
            self._complaints[stored.id] = stored
            owner.complaints.append(stored.model_copy(deep=True))
            logger.info("Stored complaint %s for user %s", stored.id, owner.id)
            return stored.model_copy(deep=True)

    def complaints_for_user(self, secret_code: str) -> List[Complaint]:
        """Return the complaint copies embedded in the user's record."""
        with self._lock:
            return [c.model_copy(deep=True) for c in self._user(secret_code).complaints]

    def all_user_complaints(self) -> List[Complaint]:
        """Concatenate every user's embedded complaints in registration order."""
        with self._lock:
            return [c.model_copy(deep=True) for user in self._users.values() for c in user.complaints]

    def get_complaint(self, complaint_id: str) -> Complaint:
        """Return the canonical complaint, checking that its owner still exists."""
        with self._lock:
            complaint = self._complaints.get(complaint_id)
            if complaint is None:
                raise ComplaintNotFound()
            self._user(complaint.secret_code)
            return complaint.model_copy(deep=True)

    def resolve_complaint(self, complaint_id: str) -> Complaint:
        """Mark the canonical complaint as resolved and return it."""
        with self._lock:
            complaint = self._complaints.get(complaint_id)
            if complaint is None:
                raise ComplaintNotFound()
            complaint.resolved = True
            logger.info("Resolved complaint %s", complaint_id)
            return complaint.model_copy(deep=True)


def get_store(request: Request) -> ComplaintStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
