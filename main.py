"""Diary Service application entry point.

Builds the FastAPI application from explicit settings. The record store,
email gateway and settings are attached to ``app.state`` so request
dependencies can reach them without module-level singletons.
"""

import logging
from typing import Optional

from application.rest.routers import router_health, router_notes
from domain.gateways.email_gateway import EmailGateway
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from infrastructure.models.base import Base
from sqlalchemy.orm import sessionmaker
from utils.aws import build_email_gateway
from utils.config import Settings
from utils.dependencies import configure_logging, create_session_factory

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    email_gateway: Optional[EmailGateway] = None,
    session_factory: Optional[sessionmaker] = None,
) -> FastAPI:
    """Create the Diary Service application.

    Args:
        settings (Settings, optional): Runtime settings. Read from the environment when omitted.
        email_gateway (EmailGateway, optional): Email service. SES when omitted.
        session_factory (sessionmaker, optional): Record store sessions. Built from
            ``settings.database_url`` when omitted.

    Returns:
        FastAPI: Configured application with all routers mounted.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if session_factory is None:
        session_factory = create_session_factory(settings.database_url)
    Base.metadata.create_all(bind=session_factory.kw["bind"])

    app = FastAPI(
        title="Dear Diary Service",
        description="Diary notes with attachments and owner-only email sharing",
        version="1.0.0",
    )

    # The browser client calls the API directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.email_gateway = email_gateway or build_email_gateway(settings)

    app.include_router(router_health.router, tags=["health"])
    app.include_router(router_notes.router, tags=["notes"])

    if not settings.share_sender_email:
        logger.warning("SHARE_SENDER_EMAIL is not set; sharing notes will fail")

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8002)
