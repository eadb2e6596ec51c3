import logging

import requests
from pydantic import ValidationError

from headline.exceptions import (
    ConfigurationError,
    DecodeError,
    TransportError,
    UpstreamProtocolError,
    UpstreamRejection,
)
from headline.http_client import get_session
from headline.models.news import NewsAPIError, Results
from headline.models.search import Search

logger = logging.getLogger(__name__)

NEWS_API_BASE = "https://newsapi.org/v2"
PAGE_SIZE = 20
SORT_BY = "publishedAt"
LANGUAGE = "en"


def _require_api_key(api_key: str) -> str:
    if not api_key:
        raise ConfigurationError(
            "News API key not configured. Pass --apikey or set NEWS_API_KEY in .env"
        )
    return api_key


def build_params(query: str, page: int, page_size: int, api_key: str) -> dict:
    """Query parameters for the /everything endpoint. requests escapes them."""
    return {
        "q": query,
        "pageSize": page_size,
        "page": page,
        "apiKey": api_key,
        "sortBy": SORT_BY,
        "language": LANGUAGE,
    }


def _handle_response(resp: requests.Response) -> Results:
    if resp.status_code != 200:
        try:
            error = NewsAPIError.model_validate_json(resp.content)
        except ValidationError as e:
            raise UpstreamProtocolError(
                f"News API returned {resp.status_code} with an unreadable body: {resp.text[:200]}"
            ) from e
        raise UpstreamRejection(error.message, code=error.code)
    try:
        return Results.model_validate_json(resp.content)
    except ValidationError as e:
        raise DecodeError(f"News API returned a malformed result body: {e}") from e


def search_everything(
    query: str,
    page: int,
    api_key: str,
    page_size: int = PAGE_SIZE,
    timeout: float | None = None,
) -> Results:
    """Fetch one page of /everything results, newest first, English only."""
    params = build_params(query, page, page_size, _require_api_key(api_key))
    logger.debug("Searching News API for %r (page %d)", query, page)
    try:
        resp = get_session().get(
            f"{NEWS_API_BASE}/everything",
            params=params,
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise TransportError(f"News API request failed: {e}") from e
    return _handle_response(resp)


def search(query: str, page: int, api_key: str, timeout: float | None = None) -> Search:
    """Run a paginated search and return the state to render."""
    state = Search(search_key=query, next_page=page)
    results = search_everything(query, state.next_page, api_key, PAGE_SIZE, timeout)
    state.finalize(results, PAGE_SIZE)
    return state
