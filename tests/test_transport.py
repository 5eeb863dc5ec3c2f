"""
Tests for the decode → invoke → encode binding, exercised directly on
a router without going through the application.
"""

import asyncio
import json

import pytest
from fastapi import APIRouter, HTTPException
from starlette.requests import Request

from string_service_api.app.api.transport import (
    CLIENT_CLOSED_REQUEST,
    DecodeError,
    RouteBinding,
    bind_route,
    decode_count_request,
    decode_uppercase_request,
)
from string_service_api.app.schemas.strings import CountRequest, CountResponse


def _request(body: bytes, *, disconnect: bool = False) -> Request:
    messages = [{"type": "http.request", "body": body, "more_body": False}]
    if disconnect:
        messages.append({"type": "http.disconnect"})

    async def receive():
        if messages:
            return messages.pop(0)
        return {"type": "http.request", "body": b"", "more_body": False}

    scope = {"type": "http", "method": "POST", "path": "/count", "headers": [], "query_string": b""}
    return Request(scope, receive)


def _handler(binding: RouteBinding):
    router = APIRouter()
    bind_route(router, binding)
    return router.routes[0].endpoint


async def _count_endpoint(ctx, request):
    return CountResponse(v=len(request.s)), None


def test_decode_valid_body():
    req = asyncio.run(decode_count_request(_request(b'{"s": "abc"}')))
    assert req == CountRequest(s="abc")


@pytest.mark.parametrize("body", [b"", b"{", b"not json", b'{"s": 1}', b"[1, 2]"])
def test_decode_rejects_malformed_body(body):
    with pytest.raises(DecodeError) as exc_info:
        asyncio.run(decode_uppercase_request(_request(body)))
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail.startswith("invalid request body")


def test_bound_route_encodes_json():
    handle = _handler(RouteBinding("/count", _count_endpoint, decode_count_request))
    response = asyncio.run(handle(_request(b'{"s": "abcd"}')))
    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert json.loads(response.body) == {"v": 4}


def test_bound_route_maps_endpoint_error_to_500():
    async def failing(ctx, request):
        return None, RuntimeError("boom")

    handle = _handler(RouteBinding("/count", failing, decode_count_request))
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(handle(_request(b'{"s": ""}')))
    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "boom"


def test_bound_route_skips_endpoint_on_decode_failure():
    called = []

    async def endpoint(ctx, request):
        called.append(request)
        return CountResponse(v=0), None

    handle = _handler(RouteBinding("/count", endpoint, decode_count_request))
    with pytest.raises(DecodeError):
        asyncio.run(handle(_request(b"{oops")))
    assert called == []


def test_bound_route_drops_response_after_disconnect():
    handle = _handler(RouteBinding("/count", _count_endpoint, decode_count_request))
    response = asyncio.run(handle(_request(b'{"s": "abc"}', disconnect=True)))
    assert response.status_code == CLIENT_CLOSED_REQUEST
    assert response.body == b""
