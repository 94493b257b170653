"""
Authorization helpers.

Regular users authenticate by presenting their secret code, which the
store resolves directly.  Administrative operations are guarded by
``AdminAuthority``: a capability holding the one secret code that
grants admin rights.  The authority is created by ``create_app`` from
the settings and handed to routes through ``get_admin_authority``, so
handlers never compare against a literal.
"""

import hmac

from fastapi import Request

from .errors import Unauthorized


class AdminAuthority:
    """Decides whether a presented secret code carries admin rights."""

    def __init__(self, admin_secret_code: str) -> None:
        self._admin_secret_code = admin_secret_code

    def is_admin(self, secret_code: str) -> bool:
        # Constant‑time comparison to prevent timing attacks
        return hmac.compare_digest(
            secret_code.encode("utf-8"), self._admin_secret_code.encode("utf-8")
        )

    def require_admin(self, secret_code: str) -> None:
        """Raise ``Unauthorized`` unless ``secret_code`` is the admin code."""
        if not self.is_admin(secret_code):
            raise Unauthorized()


def get_admin_authority(request: Request) -> AdminAuthority:
    """FastAPI dependency returning the application's admin authority."""
    return request.app.state.admin_authority
