"""Complaint Tracker API client.

This module defines a simple client wrapper around the complaint
tracker's HTTP API.  The client uses the ``requests`` library
internally; every call is a ``POST`` with a JSON body to one of the
fixed operation paths.

The client exposes one method per operation:

* :meth:`register` – create a user with a secret code.
* :meth:`login` – fetch a user's record by secret code.
* :meth:`submit_complaint` – file a complaint for a user.
* :meth:`get_complaints_for_user` – list a user's complaints.
* :meth:`get_complaints_for_admin` – list every complaint (admin code).
* :meth:`view_complaint` – fetch one complaint by ID.
* :meth:`resolve_complaint` – mark a complaint as resolved (admin code).

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``, the latter taken from the
server's ``{"error": ...}`` body.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class ComplaintTrackerClient:
    """HTTP client for the complaint tracker."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            api_prefix: Optional mount prefix such as ``/api/v1``.  The
                operations are also served at the root, which is the
                default.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _post(self, operation: str, payload: Dict[str, Any]) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Send ``payload`` to ``/<operation>`` and decode the answer.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty 201/204 answers.
        """
        url = f"{self.base_url}/{operation}"
        try:
            logger.debug("Sending POST request to %s", url)
            response = self.session.request(method="POST", url=url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(body, dict):
                        message = body.get("error") or ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def register(self, secret_code: str, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Register a user.

        Returns:
            A tuple ``(user, error)``; ``user`` carries the generated ``id``.
        """
        return self._post("register", {"secretCode": secret_code, "name": name, "email": email})

    def login(self, secret_code: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._post("login", {"secretCode": secret_code})

    # ------------------------------------------------------------------
    # Complaint operations
    # ------------------------------------------------------------------
    def submit_complaint(
        self, secret_code: str, title: str, summary: str, severity: int
    ) -> Tuple[bool, Optional[ApiError]]:
        """File a complaint on behalf of the user owning ``secret_code``.

        The server does not return the new complaint, so success is
        reported as ``True``.
        """
        payload = {"title": title, "summary": summary, "severity": severity, "SecretCode": secret_code}
        _, error = self._post("submitComplaint", payload)
        return error is None, error

    def get_complaints_for_user(self, secret_code: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._post("getAllComplaintsForUser", {"secretCode": secret_code})
        if error:
            return [], error
        return data or [], None

    def get_complaints_for_admin(self, admin_secret_code: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._post("getAllComplaintsForAdmin", {"secretCode": admin_secret_code})
        if error:
            return [], error
        return data or [], None

    def view_complaint(self, complaint_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._post("viewComplaint", {"id": complaint_id})

    def resolve_complaint(self, complaint_id: str, admin_secret_code: str) -> Tuple[bool, Optional[ApiError]]:
        """Mark a complaint as resolved.

        Args:
            complaint_id: Identifier of the complaint.
            admin_secret_code: The administrator's secret code.
        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._post("resolveComplaint", {"id": complaint_id, "secretCode": admin_secret_code})
        return error is None, error
