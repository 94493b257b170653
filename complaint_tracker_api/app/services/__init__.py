"""
Service layer abstraction.

Each service encapsulates the request operations of one domain on top
of a ``ComplaintStore``.  Services are constructed per request with the
store (and, where needed, the admin authority) injected, so they can be
exercised without an HTTP layer.
"""
