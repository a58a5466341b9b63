from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from confirm_core.db import lookup_session
from confirm_core.ui.templating import TemplateLoader

logger = logging.getLogger(__name__)

SESSION_PARAM = "s"
PAGE_METHODS = ["GET", "HEAD"]

router = APIRouter(tags=["ui"])


def _get_db_path(request: Request) -> Path:
    db_path = getattr(request.app.state, "db_path", None)
    if db_path is None:
        raise HTTPException(status_code=500, detail="DB not initialized")
    return db_path


def _loader(request: Request) -> TemplateLoader:
    return request.app.state.template_loader


def _session_param(request: Request) -> str | None:
    # Present-but-blank (?s=) still counts; repeated params use the first value.
    values = request.query_params.getlist(SESSION_PARAM)
    if not values:
        return None
    return values[0]


def _check_session(request: Request) -> bool:
    """True when ``s`` was supplied and the lookup ran, matched or not.

    Store errors still propagate; a missing row does not change the outcome.
    """

    raw = _session_param(request)
    if raw is None:
        return False

    result = lookup_session(_get_db_path(request), session_id=raw)
    if not result.found:
        logger.debug("No confirm row for session %r", raw)
    return True


@router.api_route("/view", methods=PAGE_METHODS, response_class=HTMLResponse)
def view_confirmation(request: Request) -> HTMLResponse:
    if _check_session(request):
        # The page never carries the session ID, found or not.
        return _loader(request).render(request, "confirm", {"session_id": ""})
    return _loader(request).render(request, "404")


@router.api_route("/confirm", methods=PAGE_METHODS, response_class=HTMLResponse)
def confirm(request: Request) -> HTMLResponse:
    if not _check_session(request):
        return HTMLResponse("")
    return _loader(request).render(request, "confirm")


@router.api_route("/", methods=PAGE_METHODS, response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    return _loader(request).render(request, "index")


# Registered last: any other path falls through to the index page.
@router.api_route(
    "/{path:path}", methods=PAGE_METHODS, response_class=HTMLResponse, include_in_schema=False
)
def index_fallback(request: Request, path: str) -> HTMLResponse:
    return index(request)
