"""
HTTP transport binding for endpoints.

Each route is described by a ``RouteBinding``: the endpoint to call,
a decoder turning the HTTP request into the endpoint's request value,
and an encoder writing the endpoint's response value back as the HTTP
reply.  ``bind_route`` registers a binding on a FastAPI router as a
``POST`` operation that runs decode → invoke → encode.

The body is read raw and validated with pydantic rather than through
FastAPI's body parameters, so a client does not need to send a JSON
``Content-Type`` header (``curl -d`` sends a form content type).
Decoding failures surface as HTTP 400 and never reach the endpoint.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Type

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError
from starlette.requests import Request

from string_service_api.app.api.endpoints import Endpoint
from string_service_api.app.schemas.strings import CountRequest, UppercaseRequest

logger = logging.getLogger(__name__)

Decoder = Callable[[Request], Awaitable[Any]]
Encoder = Callable[[Request, Any], Awaitable[Response]]

# Non-standard status used when the client went away before the
# response was written.
CLIENT_CLOSED_REQUEST = 499


class DecodeError(HTTPException):
    """The request body is not well-formed JSON of the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def make_json_decoder(model: Type[BaseModel]) -> Decoder:
    """Return a decoder parsing the request body as JSON into ``model``."""

    async def decode(request: Request) -> BaseModel:
        body = await request.body()
        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            first = exc.errors(include_url=False)[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            detail = f"invalid request body: {first['msg']}"
            if location:
                detail = f"{detail} ({location})"
            logger.warning("Rejected %s request to %s: %s", model.__name__, request.url.path, detail)
            raise DecodeError(detail) from exc

    return decode


decode_uppercase_request = make_json_decoder(UppercaseRequest)
decode_count_request = make_json_decoder(CountRequest)


async def encode_response(request: Request, response: BaseModel) -> Response:
    """Serialize ``response`` as the JSON body of a 200 reply."""
    return Response(content=response.model_dump_json(), media_type="application/json")


@dataclass(frozen=True)
class RouteBinding:
    """A route together with its decode, invoke and encode steps.

    ``request_model`` and ``response_model`` only feed the OpenAPI
    document; decoding and encoding are done by ``decode`` and
    ``encode``.
    """

    path: str
    endpoint: Endpoint
    decode: Decoder
    encode: Encoder = encode_response
    request_model: Optional[Type[BaseModel]] = None
    response_model: Optional[Type[BaseModel]] = None


def bind_route(router: APIRouter, binding: RouteBinding) -> None:
    """Register ``binding`` on ``router`` as a POST operation."""

    async def handle(request: Request) -> Response:
        payload = await binding.decode(request)
        logger.debug("Invoking %s", binding.path)
        response, error = await binding.endpoint(request, payload)
        if error is not None:
            logger.error("Endpoint %s failed: %s", binding.path, error)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
        if await request.is_disconnected():
            # Nothing to roll back; just don't write the body.
            logger.info("Client disconnected from %s, dropping response", binding.path)
            return Response(status_code=CLIENT_CLOSED_REQUEST)
        return await binding.encode(request, response)

    openapi_extra = None
    if binding.request_model is not None:
        openapi_extra = {
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": binding.request_model.model_json_schema()}},
            }
        }
    router.add_api_route(
        binding.path,
        handle,
        methods=["POST"],
        response_model=binding.response_model,
        name=binding.path.strip("/"),
        openapi_extra=openapi_extra,
    )
