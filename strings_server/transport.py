"""JSON over HTTP transport for endpoints.

An EndpointServer decodes the HTTP request into the endpoint's typed request,
invokes the endpoint, and encodes the typed response back onto the wire.
Only transport errors become HTTP errors; business errors travel inside the
encoded response with a 200 status.
"""
from collections.abc import Awaitable, Callable, Sequence
from typing import Generic
from uuid import uuid4

from fastapi import APIRouter, Request, Response
from loguru import logger
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError
from starlette.requests import ClientDisconnect

from strings_server.endpoint import Context, Endpoint, ReqT, RespT
from strings_server.errors import DecodeError, EncodeError, StringsServerError
from strings_server.schema import ErrorResponse, UppercaseRequest


DecodeRequestFunc = Callable[[Context, Request], Awaitable[ReqT]]
EncodeResponseFunc = Callable[[Context, RespT], Response]
RequestHook = Callable[[Context, Request], Context]
ResponseHook = Callable[[Context, Response], None]
ErrorEncoder = Callable[[Context, StringsServerError], Response]
ErrorHandler = Callable[[Context, StringsServerError], None]


async def decode_uppercase_request(_ctx: Context, request: Request) -> UppercaseRequest:
    try:
        body = await request.body()
    except ClientDisconnect as e:
        raise DecodeError("client disconnected while sending the request body") from e
    try:
        return UppercaseRequest.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"malformed request body: {e.errors()[0]['msg']}") from e


def encode_response(_ctx: Context, response: BaseModel) -> Response:
    try:
        content = response.model_dump_json()
    except PydanticSerializationError as e:
        raise EncodeError(f"could not serialize {type(response).__name__}") from e
    return Response(content=content, media_type="application/json")


def default_error_encoder(_ctx: Context, err: StringsServerError) -> Response:
    """Writes the error as {"detail": ...} with the error's status code, or 500."""
    status_code = getattr(err, "status_code", 500)
    body = ErrorResponse(detail=str(err)).model_dump_json()
    return Response(content=body, status_code=status_code, media_type="application/json")


def default_error_handler(ctx: Context, err: StringsServerError) -> None:
    request_id = ctx.get("request_id")
    if isinstance(err, DecodeError):
        logger.warning(f"Rejected request {request_id}: {err}")
    else:
        logger.opt(exception=err).error(f"Failed handling request {request_id}: {err}")


def populate_request_id(ctx: Context, request: Request) -> Context:
    """Puts the caller's X-Request-ID, or a fresh one, into the context."""
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    return {**ctx, "request_id": request_id}


def set_request_id_header(ctx: Context, response: Response) -> None:
    request_id = ctx.get("request_id")
    if request_id:
        response.headers["X-Request-ID"] = request_id


class EndpointServer(Generic[ReqT, RespT]):
    """Serves a single endpoint over HTTP.

    Args:
        endpoint: The endpoint to invoke
        decode: Turns the HTTP request into the endpoint's request
        encode: Turns the endpoint's response into an HTTP response
        before: Hooks run before decoding, each returning the context for the next step
        after: Hooks run on every HTTP response, including error responses
        error_encoder: Builds the HTTP response for a failed request
        error_handler: Observes every failed request, e.g. for logging
    """

    def __init__(
        self,
        endpoint: Endpoint[ReqT, RespT],
        decode: DecodeRequestFunc[ReqT],
        encode: EncodeResponseFunc[RespT],
        *,
        before: Sequence[RequestHook] = (),
        after: Sequence[ResponseHook] = (),
        error_encoder: ErrorEncoder = default_error_encoder,
        error_handler: ErrorHandler = default_error_handler,
    ) -> None:
        self.endpoint = endpoint
        self.decode = decode
        self.encode = encode
        self.before = list(before)
        self.after = list(after)
        self.error_encoder = error_encoder
        self.error_handler = error_handler

    async def handle(self, request: Request) -> Response:
        ctx: Context = {}
        for hook in self.before:
            ctx = hook(ctx, request)

        try:
            req = await self.decode(ctx, request)
            resp = await self.endpoint(ctx, req)
            http_response = self.encode(ctx, resp)
        except StringsServerError as e:
            self.error_handler(ctx, e)
            http_response = self.error_encoder(ctx, e)
        else:
            logger.debug(f"Handled request {ctx.get('request_id')} on {request.url.path}")

        for hook in self.after:
            hook(ctx, http_response)
        return http_response


def bind(
    router: APIRouter,
    path: str,
    server: EndpointServer,
    methods: Sequence[str] = ("POST",),
    request_model: type[BaseModel] | None = None,
    response_model: type[BaseModel] | None = None,
) -> None:
    """Registers the server's handler on the router.

    The handler reads the raw request, so request_model only documents the body in OpenAPI.
    """
    openapi_extra = None
    if request_model is not None:
        openapi_extra = {
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": request_model.model_json_schema()}},
            }
        }
    router.add_api_route(
        path,
        server.handle,
        methods=list(methods),
        response_model=response_model,
        openapi_extra=openapi_extra,
    )
