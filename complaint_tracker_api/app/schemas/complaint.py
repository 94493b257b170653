"""
Pydantic schemas for complaints.

``Complaint`` is both the submission payload and the stored record.
The owner's secret code arrives as ``SecretCode`` (older clients send
``secretCode``) and is kept on the record so the owner can be found
without scanning the user table.  It is excluded from every response:
complaints are readable by anyone who knows their ID, and the code is
the owner's only credential.
"""

from pydantic import AliasChoices, Field, StrictBool, StrictInt, StrictStr

from .common import WireModel


class Complaint(WireModel):
    """A complaint as submitted by a user and held in the store."""

    id: StrictStr = Field("", examples=["1"])
    title: StrictStr = Field("", examples=["Broken heating"])
    summary: StrictStr = Field("", examples=["No heating on the second floor since Monday"])
    severity: StrictInt = Field(0, examples=[5])
    resolved: StrictBool = False
    secret_code: StrictStr = Field(
        "",
        validation_alias=AliasChoices("SecretCode", "secretCode", "secret_code"),
        exclude=True,
    )


class ComplaintLookup(WireModel):
    """Body of ``viewComplaint``."""

    id: StrictStr = ""


class ResolveComplaintRequest(WireModel):
    """Body of ``resolveComplaint``: the complaint and the admin code together."""

    id: StrictStr = ""
    secret_code: StrictStr = Field("", alias="secretCode")
