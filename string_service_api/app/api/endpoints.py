"""
Endpoint adapters for the string service.

An endpoint represents a single remote procedure.  It is an async
callable taking the request context (the inbound Starlette
``Request``) and a decoded request body, and returning a tuple
``(response, error)``.  ``error`` is reserved for transport-level
faults; business failures reported by the service are carried inside
the response itself, so a failed upper-casing still travels back to
the caller as an ordinary response.
"""

import logging
from typing import Any, Awaitable, Callable, Optional, Tuple

from starlette.requests import Request

from string_service_api.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from string_service_api.app.services.string_service import EmptyStringError, StringService

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request, Any], Awaitable[Tuple[Any, Optional[Exception]]]]


def _expect(request: Any, model: type) -> None:
    if not isinstance(request, model):
        raise TypeError(f"expected {model.__name__}, got {type(request).__name__}")


def make_uppercase_endpoint(svc: StringService) -> Endpoint:
    """Adapt ``svc.uppercase`` into an endpoint."""

    async def uppercase_endpoint(ctx: Request, request: Any) -> Tuple[Any, Optional[Exception]]:
        _expect(request, UppercaseRequest)
        try:
            v = svc.uppercase(request.s)
        except EmptyStringError as exc:
            logger.debug("uppercase rejected input: %s", exc)
            return UppercaseResponse(v="", err=str(exc)), None
        return UppercaseResponse(v=v), None

    return uppercase_endpoint


def make_count_endpoint(svc: StringService) -> Endpoint:
    """Adapt ``svc.count`` into an endpoint.  Counting cannot fail."""

    async def count_endpoint(ctx: Request, request: Any) -> Tuple[Any, Optional[Exception]]:
        _expect(request, CountRequest)
        return CountResponse(v=svc.count(request.s)), None

    return count_endpoint
