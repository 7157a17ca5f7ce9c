# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Starter API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   starter-api                        # validate config from env, then serve
#   python -m app.main                 # same
#   uvicorn app.main:app --reload      # development, no startup validation
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import register_exception_handlers
from app.routers import health, users
from core.config_validator import validate_config
from core.exceptions import ConfigurationError
from core.models.config import AppConfig
from core.models.response import ApiResponse

# Configure logging
logging.basicConfig(
    level=settings.log_level_number,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Records the startup time for uptime reporting, logs where the server
    listens, and notes shutdown.
    """
    app.state.started_at = time.monotonic()
    base_url = f"http://{settings.HOST}:{settings.PORT}"
    logger.info(f"Starting Starter API in {settings.ENVIRONMENT} mode")
    logger.info(f"API Server running at {base_url}")
    logger.info(f"Health check: {base_url}/api/health")
    if app.state.config is None:
        logger.warning("No validated configuration supplied; running with settings only")

    yield

    logger.info("Shutting down Starter API")


def _cors_options(config: AppConfig | None) -> tuple[list[str], bool]:
    """Allowed origins and credentials flag, from config when it has them."""
    if config is not None and config.api is not None and config.api.cors is not None:
        return list(config.api.cors.origin), config.api.cors.credentials
    return settings.cors_origins_list or ["*"], True


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: The validated configuration, kept on app.state.config.
            None when the app is served without startup validation.
    """
    app = FastAPI(
        title="Starter API",
        description="Mock user endpoints and health check for the starter monorepo.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Users", "description": "Mock user endpoints"},
            {"name": "Health", "description": "API health checks"},
        ],
    )
    app.state.config = config
    # Reset by lifespan when the server starts
    app.state.started_at = time.monotonic()

    # =========================================================================
    # Middleware
    # =========================================================================

    origins, credentials = _cors_options(config)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(users.router, prefix="/api", tags=["Users"])

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return ApiResponse.ok(
            {
                "version": API_VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
            message="Welcome to NX Monorepo API!",
        ).to_body()

    return app


def run() -> None:
    """
    Validate startup configuration and serve.

    Exits with status 1 when the configuration is rejected.
    """
    try:
        config = validate_config(settings.to_partial_config())
    except ConfigurationError as e:
        logger.error(f"Startup aborted: {e}")
        for err in e.details.get("errors", []):
            logger.error(f"  {err['loc']}: {err['msg']}")
        raise SystemExit(1) from e

    uvicorn.run(
        create_app(config),
        host=settings.HOST,
        port=settings.PORT,
        log_level=logging.getLevelName(settings.log_level_number).lower(),
    )


# Application instance for `uvicorn app.main:app`
app = create_app()


if __name__ == "__main__":
    run()
