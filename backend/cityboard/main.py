"""FastAPI main application."""
import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from cityboard.adapters import (
    CurrencyAdapter,
    NewsAdapter,
    WeatherAdapter,
    get_currency_adapter,
    get_news_adapter,
    get_weather_adapter,
)
from cityboard.config import settings
from cityboard.errors import DashboardError
from cityboard.models import CurrencyQuote, ErrorBody, NewsBundle, WeatherReport
from cityboard.utils.log_format import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(title=settings.app_name, debug=settings.debug)

# Allow the page to be served from another origin during development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

ERROR_RESPONSES = {
    400: {"model": ErrorBody},
    404: {"model": ErrorBody},
    500: {"model": ErrorBody},
}


@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError):
    """Render domain errors as {"error": ..., "details": ...} with their status."""
    logger.info(
        "Request failed",
        extra={"path": request.url.path, "status": exc.status_code, "error": exc.message},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Anything unexpected becomes a generic 500 without internal details."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@app.get("/api/weather", response_model=WeatherReport, responses=ERROR_RESPONSES)
async def get_weather(
    city: Optional[str] = Query(None, description="City name"),
    adapter: WeatherAdapter = Depends(get_weather_adapter),
):
    """Current weather for a city."""
    return await adapter.fetch(city)


@app.get("/api/news", response_model=NewsBundle, responses=ERROR_RESPONSES)
async def get_news(
    city: Optional[str] = Query(None, description="City name"),
    adapter: NewsAdapter = Depends(get_news_adapter),
):
    """Up to five recent English-language articles about a city."""
    return await adapter.fetch(city)


@app.get(
    "/api/currency",
    response_model=CurrencyQuote,
    responses={**ERROR_RESPONSES, 502: {"model": ErrorBody}},
)
async def get_currency(
    base: Optional[str] = Query(None, description="Base currency code, e.g. EUR"),
    target: Optional[str] = Query(None, description="Target currency code, e.g. USD"),
    adapter: CurrencyAdapter = Depends(get_currency_adapter),
):
    """Exchange rate from base to target (units of target per one base)."""
    return await adapter.fetch(base, target)


@app.get("/{full_path:path}", include_in_schema=False)
async def index(full_path: str):
    """Serve the single-page client for every other path."""
    return FileResponse(STATIC_DIR / "index.html")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
