"""
Statasphere Channel Intelligence
Main FastAPI application
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.middleware.gzip import GZipMiddleware
from contextlib import asynccontextmanager

from statasphere.config import get_settings
from statasphere.utils.logger import log
from statasphere import __version__

from statasphere.api import diagnose, health, pages
from statasphere.api.deps import get_bigquery_connector
from statasphere.middleware.security_middleware import SecurityMiddleware

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    log.info(f"Starting {settings.app_name} v{__version__}")
    log.info(f"Environment: {settings.environment}")

    connector = get_bigquery_connector()
    if not connector.has_credentials:
        log.warning("GOOGLE_APPLICATION_CREDENTIALS missing or unreadable; diagnose queries will fail")
    log.info(f"Diagnose view reads from {settings.performance_table}")

    yield

    log.info("Shutting down application")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="""
    AI-powered visibility and performance diagnostics across every channel.

    Views (selected by URL fragment):
    - #dashboard: feed overview (default)
    - #diagnose: latest warehouse performance rows
    - #optimize: segment optimisation actions
    - #impact: results of optimisation work
    """,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Security middleware (Basic Auth gate, X-Robots-Tag, Cache-Control)
app.add_middleware(SecurityMiddleware)

app.add_middleware(GZipMiddleware, minimum_size=500)

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(diagnose.router)
app.include_router(pages.router)


@app.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt():
    """Block all crawlers"""
    return "User-agent: *\nDisallow: /\n"


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "statasphere.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
