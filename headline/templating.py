import logging
from functools import lru_cache
from pathlib import Path
from urllib.parse import urlsplit

import jinja2
from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def safe_url(url: str) -> str:
    """Return url if it is http(s), else an empty string."""
    try:
        scheme = urlsplit(url.strip()).scheme.lower()
    except ValueError:
        return ""
    return url if scheme in ("http", "https") else ""


@lru_cache
def get_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    templates.env.filters["safe_url"] = safe_url
    return templates


def render(templates: Jinja2Templates, request: Request, name: str, context: dict) -> Response:
    """Render a template, answering 500 if the template itself fails."""
    try:
        return templates.TemplateResponse(request, name, context)
    except jinja2.TemplateError:
        logger.exception("Failed to render template %s", name)
        return PlainTextResponse("Internal server error", status_code=500)
