"""FastAPI application for the progress-pals web interface."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..data.quote_loader import seed_quotes
from ..db.engine import get_db_path, init_db
from ..db.repositories import ProfileRepository
from .routers import api, dashboard, goals, measurements, onboarding

logger = logging.getLogger(__name__)

# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

# Reachable before onboarding is complete
ONBOARDING_EXEMPT_PREFIXES = ("/onboarding", "/health", "/api", "/static")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    db_path = app.state.db_path
    await init_db(db_path)
    await seed_quotes(db_path)
    logger.info("Database ready at %s", db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="progress-pals",
        description="Personal weight tracking",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    templates.env.filters["kg"] = format_kg
    app.state.templates = templates

    app.include_router(dashboard.router)
    app.include_router(onboarding.router)
    app.include_router(measurements.router)
    app.include_router(goals.router)
    app.include_router(api.router)

    @app.middleware("http")
    async def require_profile(request: Request, call_next):
        """Send users without a profile to onboarding."""
        path = request.url.path
        if not path.startswith(ONBOARDING_EXEMPT_PREFIXES):
            profile = await ProfileRepository(request.app.state.db_path).get_latest()
            if profile is None:
                return RedirectResponse(url="/onboarding", status_code=302)
        return await call_next(request)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app


def format_kg(value: float | None, digits: int = 1) -> str:
    """Template filter: ``72.25`` -> ``"72.3 kg"``, None -> ``"N/A"``."""
    if value is None:
        return "N/A"
    return f"{value:.{digits}f} kg"

