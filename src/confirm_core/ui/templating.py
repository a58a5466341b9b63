from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from confirm_core.errors import TemplateLoadError

TEMPLATE_SUFFIX = ".html"


@contextmanager
def _template_errors(filename: str, directory: Path) -> Iterator[None]:
    try:
        yield
    except jinja2.TemplateNotFound as exc:
        raise TemplateLoadError(f"Template {filename!r} not found in {directory}") from exc
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateLoadError(f"Template {filename!r} failed to parse: {exc}") from exc
    except jinja2.TemplateError as exc:
        raise TemplateLoadError(f"Template {filename!r} failed to execute: {exc}") from exc


class TemplateLoader:
    """Loads ``<directory>/<name>.html`` fresh for every call.

    ``cache_size=0`` turns off Jinja2's template cache, so each lookup re-reads
    and re-parses the file.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.directory)),
            autoescape=jinja2.select_autoescape(["html"]),
            cache_size=0,
        )
        self.templates = Jinja2Templates(env=env)

    def load(self, name: str) -> jinja2.Template:
        filename = name + TEMPLATE_SUFFIX
        with _template_errors(filename, self.directory):
            return self.templates.get_template(filename)

    def render(
        self,
        request: Request,
        name: str,
        context: dict[str, Any] | None = None,
        *,
        status_code: int = 200,
    ) -> HTMLResponse:
        template = self.load(name)
        ctx: dict[str, Any] = {"request": request}
        if context:
            ctx.update(context)
        with _template_errors(name + TEMPLATE_SUFFIX, self.directory):
            content = template.render(ctx)
        return HTMLResponse(content, status_code=status_code)
