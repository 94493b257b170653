"""
Business logic for users.

Registration and login.  The secret code is both the user's lookup key
and its only credential; login returns the full stored record,
including the code and the user's complaint copies.
"""

import logging

from ..core.errors import DuplicateSecretCode, UserNotFound
from ..core.store import ComplaintStore
from ..schemas.user import User


logger = logging.getLogger(__name__)


class UserService:
    """Registration and login on top of a ``ComplaintStore``."""

    def __init__(self, store: ComplaintStore) -> None:
        self.store = store

    async def register(self, data: User) -> User:
        """Register a new user.

        The store assigns the ID and starts the user with an empty
        complaint list, whatever the payload carried in those fields.

        Raises
        ------
        DuplicateSecretCode
            If the secret code is already registered.
        """
        try:
            return self.store.register(data)
        except DuplicateSecretCode:
            logger.warning("Registration rejected: secret code already in use")
            raise

    async def login(self, secret_code: str) -> User:
        """Return the stored user for ``secret_code``.

        Raises
        ------
        UserNotFound
            If no user holds the code.
        """
        try:
            return self.store.get_user(secret_code)
        except UserNotFound:
            logger.warning("Login failed: unknown secret code")
            raise
