"""
Pydantic models for user data.

A user is identified and authenticated by the same value, its secret
code.  ``User`` is the registration payload and the stored record;
``id`` and ``complaints`` sent by a client on registration are
ignored and replaced by the store.
"""

from typing import List

from pydantic import Field, StrictStr

from .common import WireModel
from .complaint import Complaint


class User(WireModel):
    """A registered user with snapshot copies of its complaints."""

    id: StrictStr = Field("", examples=["1"])
    secret_code: StrictStr = Field("", alias="secretCode", examples=["c1"])
    name: StrictStr = Field("", examples=["Jane Doe"])
    email: StrictStr = Field("", examples=["jane@example.com"])
    complaints: List[Complaint] = Field(default_factory=list)


class SecretCodeRequest(WireModel):
    """Body carrying only a secret code (login and complaint listings)."""

    secret_code: StrictStr = Field("", alias="secretCode")
