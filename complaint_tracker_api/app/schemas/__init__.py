"""
Pydantic schema definitions for API payloads.

``user`` and ``complaint`` define both the stored records and the
request bodies of the seven operations.  ``common`` holds the shared
decoding rules and the error body.
"""
