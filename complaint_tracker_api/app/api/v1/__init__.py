"""
Version 1 of the API.

This subpackage bundles the seven complaint tracker operations.  The
paths are the historical ones (``/login``, ``/register``, ...) and must
not be renamed; breaking changes belong in a new version subpackage.
"""
