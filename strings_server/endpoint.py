"""Endpoints map a typed request to a typed response by calling a single service method.

Endpoints know nothing about HTTP. Business errors raised by the service are
caught here and returned inside the response, so an endpoint only raises on bugs.
"""
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel

from strings_server.errors import ServiceError
from strings_server.schema import UppercaseRequest, UppercaseResponse
from strings_server.service import StringService


ReqT = TypeVar("ReqT", bound=BaseModel)
RespT = TypeVar("RespT", bound=BaseModel)

# request scoped values, populated by the transport's before hooks
Context = Mapping[str, Any]

Endpoint = Callable[[Context, ReqT], Awaitable[RespT]]


def make_uppercase_endpoint(svc: StringService) -> Endpoint[UppercaseRequest, UppercaseResponse]:
    async def uppercase_endpoint(ctx: Context, request: UppercaseRequest) -> UppercaseResponse:
        try:
            v = svc.uppercase(request.s)
        except ServiceError as e:
            logger.debug(f"uppercase failed for request {ctx.get('request_id')}: {e}")
            return UppercaseResponse(s="", err=str(e))
        return UppercaseResponse(s=v)

    return uppercase_endpoint
