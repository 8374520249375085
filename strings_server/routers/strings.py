from fastapi import APIRouter

from strings_server.endpoint import make_uppercase_endpoint
from strings_server.schema import UppercaseRequest, UppercaseResponse
from strings_server.service import StringService
from strings_server.transport import (
    EndpointServer,
    bind,
    decode_uppercase_request,
    encode_response,
    populate_request_id,
    set_request_id_header,
)


def make_router(svc: StringService) -> APIRouter:
    """Builds the router exposing each StringService method as its own route."""
    router = APIRouter(tags=["strings"])

    uppercase_server = EndpointServer(
        make_uppercase_endpoint(svc),
        decode_uppercase_request,
        encode_response,
        before=[populate_request_id],
        after=[set_request_id_header],
    )
    bind(
        router,
        "/uppercase",
        uppercase_server,
        request_model=UppercaseRequest,
        response_model=UppercaseResponse,
    )

    return router
