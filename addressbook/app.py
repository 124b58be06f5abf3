"""FastAPI application factory for the address book."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import AddressBookSettings, settings
from .errors import InvalidContact, InvalidId
from .services.contact_store import ContactStore
from .wiring import build_store

logger = logging.getLogger(__name__)


def create_app(
    store: ContactStore | None = None,
    cfg: AddressBookSettings = settings,
) -> FastAPI:
    """Build the app around ``store``, or around one built from ``cfg`` at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = None
        if app.state.store is None:
            app.state.store, engine = await build_store(cfg)
        try:
            yield
        finally:
            if engine is not None:
                await engine.dispose()

    app = FastAPI(title=cfg.app_title, lifespan=lifespan)
    app.state.store = store
    app.state.settings = cfg

    @app.exception_handler(InvalidId)
    async def invalid_id_handler(request: Request, exc: InvalidId):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidContact)
    async def invalid_contact_handler(request: Request, exc: InvalidContact):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "errors": exc.errors},
        )

    from .routers import api, contacts, health

    app.state.templates = contacts.build_templates(cfg)
    app.include_router(contacts.router)
    app.include_router(api.router)
    app.include_router(health.router)
    return app


app = create_app()
