"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The in‑memory store and the admin capability live in
``core``, wire payloads in ``schemas``, the request operations in
``services`` and the HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
