"""
Route table for the string service.

Both routes share one ``StringService`` instance; the service has no
state, so concurrent requests need no coordination.  To expose a new
operation, add its endpoint adapter and a ``RouteBinding`` here.
"""

from fastapi import APIRouter

from string_service_api.app.api.endpoints import make_count_endpoint, make_uppercase_endpoint
from string_service_api.app.api.transport import (
    RouteBinding,
    bind_route,
    decode_count_request,
    decode_uppercase_request,
    encode_response,
)
from string_service_api.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from string_service_api.app.services.string_service import StringService

svc = StringService()

ROUTES = [
    RouteBinding(
        path="/uppercase",
        endpoint=make_uppercase_endpoint(svc),
        decode=decode_uppercase_request,
        encode=encode_response,
        request_model=UppercaseRequest,
        response_model=UppercaseResponse,
    ),
    RouteBinding(
        path="/count",
        endpoint=make_count_endpoint(svc),
        decode=decode_count_request,
        encode=encode_response,
        request_model=CountRequest,
        response_model=CountResponse,
    ),
]

router = APIRouter(tags=["strings"])

for binding in ROUTES:
    bind_route(router, binding)
