import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from headline.config import get_settings
from headline.exceptions import NewsSearchError
from headline.routers.search import router as search_router

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets"


# --- FastAPI app ---

app = FastAPI(title="Headline", version="0.1.0")
app.mount("/assets", StaticFiles(directory=ASSETS_DIR), name="assets")
app.include_router(search_router)


# --- Exception handlers ---

@app.exception_handler(NewsSearchError)
async def news_search_error_handler(request: Request, exc: NewsSearchError):
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return PlainTextResponse(exc.public_message, status_code=500)


# --- Entry point ---

def run(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="headline", description="Search NewsAPI.org articles from the browser.")
    parser.add_argument("--apikey", default="", help="Newsapi.org access key (defaults to NEWS_API_KEY)")
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.apikey:
        settings = settings.model_copy(update={"news_api_key": args.apikey})

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if not settings.news_api_key:
        logger.critical("apiKey must be set")
        sys.exit(1)

    app.dependency_overrides[get_settings] = lambda: settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
