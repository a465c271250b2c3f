import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from ziva_admin.api import api_router
from ziva_admin.api.htmx import router as htmx_router
from ziva_admin.config import get_settings
from ziva_admin.sessions import sessions

settings = get_settings()

# Configure logging - centralized configuration for the entire application
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Set third-party loggers to WARNING to reduce noise
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting Ziva Admin against {settings.storefront_base_url}")
    yield
    # Shutdown
    logger.info(f"Shutting down Ziva Admin, dropping {len(sessions)} sessions")
    sessions.clear()


app = FastAPI(
    title="Ziva Admin",
    description="Storefront category management dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
STATIC_DIR = Path(__file__).parent.parent / "static"
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Include API routes
app.include_router(api_router, prefix="/api")

# Include HTMX routes (HTML pages)
app.include_router(htmx_router, prefix="/app")


@app.get("/")
async def root():
    return RedirectResponse(url="/app/categories")
