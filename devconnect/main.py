# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, health_router, post_router, profile_router, users_router
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The Mongo client connects lazily on first use; shutdown closes it.
    """
    logger.info("DevConnect API started")
    yield
    close_database()
    # Repositories hold collections of the closed client
    reset_container()
    logger.info("Application shutdown complete")


def _validation_param(location) -> str:
    # ("body", "email") -> "email"; bare ("body",) stays "body"
    parts = [str(part) for part in location if part not in ("body", "query", "path", "header")]
    return ".".join(parts) if parts else ".".join(str(part) for part in location)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP errors; a dict detail (field error lists) becomes the whole body
    so it matches the request validation shape
    """
    content = exc.detail if isinstance(exc.detail, dict) else {"detail": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape request validation failures into the {"errors": [...]} body"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "errors": [
                {"param": _validation_param(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in exc.errors()
            ]
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all; never leaks internal details"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server Error"},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging and CORS configuration
    - Error handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title="DevConnect API",
        version="1.0.0",
        description="Developer social network backend",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(Exception, generic_error_handler)

    # Register API routers
    application.include_router(health_router)
    application.include_router(users_router, prefix="/api/v1/users")
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(post_router, prefix="/api/v1/posts")
    application.include_router(profile_router, prefix="/api/v1/profile")

    return application


# Create application instance
app = create_application()
