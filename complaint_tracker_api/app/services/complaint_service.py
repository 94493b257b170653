"""
Business logic for complaints.

Users submit complaints and list their own; anyone holding a
complaint ID can view it; the administrator lists every complaint and
resolves them.  Listings read the copies embedded in user records and
may therefore report a complaint as unresolved after it was resolved,
while ``view`` always reads the canonical table.
"""

import logging
from typing import List

from ..core.errors import ComplaintNotFound, Unauthorized, UserNotFound
from ..core.security import AdminAuthority
from ..core.store import ComplaintStore
from ..schemas.complaint import Complaint


logger = logging.getLogger(__name__)


class ComplaintService:
    """Complaint operations on top of a ``ComplaintStore``."""

    def __init__(self, store: ComplaintStore, authority: AdminAuthority) -> None:
        self.store = store
        self.authority = authority

    async def submit(self, data: Complaint) -> Complaint:
        """Store a complaint for the user owning ``data.secret_code``.

        Parameters
        ----------
        data : Complaint
            Submitted complaint.  ``id`` and ``resolved`` are assigned by
            the store.

        Returns
        -------
        Complaint
            The stored complaint with its generated ID.

        Raises
        ------
        UserNotFound
            If the secret code does not belong to a registered user.
        """
        try:
            return self.store.add_complaint(data)
        except UserNotFound:
            logger.warning("Complaint rejected: unknown secret code")
            raise

    async def list_for_user(self, secret_code: str) -> List[Complaint]:
        return self.store.complaints_for_user(secret_code)

    async def list_for_admin(self, secret_code: str) -> List[Complaint]:
        """Return every user's complaints.  Admin only."""
        self._require_admin(secret_code, "list all complaints")
        return self.store.all_user_complaints()

    async def view(self, complaint_id: str) -> Complaint:
        return self.store.get_complaint(complaint_id)

    async def resolve(self, complaint_id: str, secret_code: str) -> Complaint:
        """Mark a complaint as resolved.  Admin only.

        The admin check happens before the complaint lookup, so an
        unauthorized caller cannot learn which IDs exist.

        Raises
        ------
        Unauthorized
            If ``secret_code`` is not the admin code.
        ComplaintNotFound
            If no complaint has ``complaint_id``.
        """
        self._require_admin(secret_code, "resolve complaint")
        try:
            return self.store.resolve_complaint(complaint_id)
        except ComplaintNotFound:
            logger.warning("Resolve failed: complaint %s not found", complaint_id)
            raise

    def _require_admin(self, secret_code: str, action: str) -> None:
        try:
            self.authority.require_admin(secret_code)
        except Unauthorized:
            logger.warning("Unauthorized attempt to %s", action)
            raise
