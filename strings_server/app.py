from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from strings_server.config import Settings, settings as default_settings
from strings_server.routers.strings import make_router
from strings_server.schema import MessageResponse
from strings_server.service import BasicStringService, StringService


@asynccontextmanager
async def lifetime(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"{app.title} is ready to serve requests")
    yield
    logger.info(f"{app.title} is shutting down")


def create_app(svc: StringService | None = None, settings: Settings = default_settings) -> FastAPI:
    """Wires the service, its endpoints and their transports into an application."""
    if svc is None:
        svc = BasicStringService()

    app = FastAPI(title="Strings", lifespan=lifetime)

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(make_router(svc))

    @app.get("/ping")
    async def ping() -> MessageResponse:
        return MessageResponse(message="Pong!")

    return app
