import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.api.router import api_router
from app.config import settings
from app.services.gitlab import close_gitlab_client

STATIC_DIR = Path(__file__).parent / "static"


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Quieten uvicorn access logs (we'll log requests ourselves)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    setup_logging()
    logger.info(f"GitLab dashboard starting up against {settings.gitlab_url}")
    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not set; logins will fail and every session credential is rejected")
    yield
    await close_gitlab_client()
    logger.info("GitLab dashboard shutting down")


app = FastAPI(
    title="GitLab Dashboard",
    description="OAuth-backed dashboard of GitLab activity, groups, projects and commits",
    version="0.1.0",
    lifespan=lifespan,
)

# Proxy headers middleware - trust X-Forwarded-Proto from the reverse proxy
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])


@app.middleware("http")
async def require_https(request: Request, call_next):
    """In production, redirect plain-HTTP requests to HTTPS."""
    if (
        settings.is_production
        and request.url.path != "/health"
        and request.headers.get("x-forwarded-proto") != "https"
    ):
        return RedirectResponse(str(request.url.replace(scheme="https")), status_code=302)
    return await call_next(request)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log non-2xx responses, skipping health checks."""
    if request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    if response.status_code >= 400:
        logger.info(f"{request.method} {request.url.path} → {response.status_code}")

    return response


app.include_router(api_router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the dashboard page."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
