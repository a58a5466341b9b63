from __future__ import annotations

import html
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from confirm_core.config import CoreConfig, resolve_templates_dir
from confirm_core.db import init_db
from confirm_core.errors import ConfirmServiceError
from confirm_core.ui.router import router as ui_router
from confirm_core.ui.templating import TemplateLoader

logger = logging.getLogger(__name__)

_ERROR_PAGE = "<!doctype html><title>{status}</title><h1>{status}</h1><p>{message}</p>\n"


def _error_page(status_code: int, message: str) -> HTMLResponse:
    return HTMLResponse(
        _ERROR_PAGE.format(status=status_code, message=html.escape(message)),
        status_code=status_code,
    )


def create_app(db_path: Path, config: CoreConfig | None = None) -> FastAPI:
    config = config or CoreConfig()
    templates_dir = resolve_templates_dir(config)

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        # StoreError propagates: a bad DB path aborts startup.
        app.state.db_path = init_db(db_path)
        logger.info("DB loaded successfully")
        logger.info(f"Templates directory: {templates_dir}")
        yield

    app = FastAPI(
        title="Confirm",
        version="0.1.0",
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.template_loader = TemplateLoader(templates_dir)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(ConfirmServiceError)
    async def _service_error_handler(request: Request, exc: ConfirmServiceError) -> HTMLResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
        return _error_page(500, "Internal server error")

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> HTMLResponse:
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        return _error_page(exc.status_code, message)

    app.include_router(ui_router)

    return app
