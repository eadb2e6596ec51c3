import re

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from headline.config import Settings, get_settings
from headline.exceptions import InputError
from headline.services import news as news_service
from headline.templating import get_templates, render

router = APIRouter(tags=["search"])

_PAGE_RE = re.compile(r"[+-]?[0-9]+")
_PAGE_MIN, _PAGE_MAX = -(2**63), 2**63 - 1


def parse_page(raw: str) -> int:
    """Parse the page query parameter; blank means the first page."""
    if raw == "":
        return 1
    if not _PAGE_RE.fullmatch(raw):
        raise InputError(f"Invalid page number: {raw!r}")
    page = int(raw)
    if not _PAGE_MIN <= page <= _PAGE_MAX:
        raise InputError(f"Page number out of range: {raw!r}")
    return page


@router.get("/", response_class=HTMLResponse)
def index(request: Request, templates: Jinja2Templates = Depends(get_templates)) -> Response:
    return render(templates, request, "index.html", {"search": None})


@router.get("/search", response_class=HTMLResponse)
def search(
    request: Request,
    q: str = "",
    page: str = "1",
    settings: Settings = Depends(get_settings),
    templates: Jinja2Templates = Depends(get_templates),
) -> Response:
    result = news_service.search(q, parse_page(page), settings.news_api_key, settings.request_timeout)
    return render(templates, request, "index.html", {"search": result})
