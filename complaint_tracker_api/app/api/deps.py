"""
Shared route helpers.

``json_body`` decodes a request body into a schema without looking at
the ``Content-Type`` header: older clients (``curl -d`` among them)
send JSON labelled as form data or plain text, and the body is
accepted as long as it is well‑formed JSON of the right shape.

``legacy_operation`` registers an operation for every HTTP method the
historical server answered.  Only ``POST`` appears in the OpenAPI
schema.
"""

import logging
from typing import Any, Awaitable, Callable, Type, TypeVar

from fastapi import APIRouter, Request
from pydantic import BaseModel, ValidationError

from ..core.errors import DecodeError


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

LEGACY_METHODS = ["GET", "PUT", "PATCH", "DELETE"]


def describe_validation_error(exc: ValidationError) -> str:
    """Turn the first validation error into a one‑line message.

    Errors on a field are prefixed with its wire name, e.g.
    ``"severity: Input should be a valid integer"``.
    """
    errors = exc.errors()
    if not errors:
        return DecodeError.message
    first = errors[0]
    message = first.get("msg", DecodeError.message)
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {message}" if field else message


def json_body(model: Type[M]) -> Callable[[Request], Awaitable[M]]:
    """Dependency factory decoding the raw request body into ``model``.

    Raises
    ------
    DecodeError
        If the body is empty, not JSON, not an object, or carries a
        field of the wrong type.
    """

    async def _decode(request: Request) -> M:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            error = DecodeError(describe_validation_error(exc))
            logger.warning("Rejected undecodable body on %s: %s", request.url.path, error.message)
            raise error from exc

    return _decode


def legacy_operation(router: APIRouter, path: str, **route_kwargs: Any) -> Callable:
    """Register the decorated endpoint on ``path`` for POST and the legacy methods."""

    def decorator(func: Callable) -> Callable:
        router.post(path, **route_kwargs)(func)
        router.api_route(path, methods=LEGACY_METHODS, include_in_schema=False, **route_kwargs)(func)
        return func

    return decorator
