from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

# Import core components
from mentorship_admin.core.logging_config import setup_logging
from mentorship_admin.core.settings import settings
from mentorship_admin.middleware.logging import LoggingMiddleware

# Import configuration
from mentorship_admin.config import init_firebase

# Import route modules
from mentorship_admin.routes import (
    health, roles, profiles, assignments, actions, applications, mentor_intake
)
from mentorship_admin.exceptions import ApiException, PersistenceException

# Set up logging first
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info("🚀 Mentorship Admin API starting up")
    logger.info(f"📁 Environment: {settings.environment}")
    logger.info(f"🌐 CORS origins: {settings.cors_origins}")
    logger.info(f"📊 SQL Debug: {'enabled' if settings.sql_debug else 'disabled'}")
    logger.info(f"🔎 Database error exposure: {'enabled' if settings.expose_db_errors else 'disabled'}")
    logger.info("=" * 50)

    # Initialize Firebase (skip in test environment)
    if not settings.is_test:
        init_firebase()

    yield
    logger.info("🛑 Mentorship Admin API shutting down gracefully")


app = FastAPI(
    title="Mentorship Admin API",
    description="Profiles, mentor-mentee assignments, action tickets, applications and mentor intake",
    version="1.0.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

# Add middleware in correct order (last added = first executed)
app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(roles.router)
app.include_router(profiles.router)
app.include_router(assignments.router)
app.include_router(actions.router)
app.include_router(applications.router)
app.include_router(mentor_intake.router)


# Exception handlers
@app.exception_handler(PersistenceException)
async def persistence_exception_handler(request: Request, exc: PersistenceException):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    logger.error(
        f"[{correlation_id}] Persistence error on {request.method} {request.url.path}: "
        f"{exc.message} (cause: {exc.cause!r})"
    )
    body = exc.to_body()
    body[exc.field] = exc.client_message(settings.expose_db_errors)
    body["correlation_id"] = correlation_id
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    logger.warning(f"[{correlation_id}] {exc.kind.value} error on {request.method} {request.url.path}: {exc.message}")
    body = exc.to_body()
    body["correlation_id"] = correlation_id
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    errors = exc.errors()
    first = errors[0] if errors else {"loc": ("body",), "msg": "Invalid request"}
    field = ".".join(str(part) for part in first.get("loc", ())) or "body"
    message = f"{field} is invalid: {first.get('msg', 'Invalid request')}"
    logger.warning(f"[{correlation_id}] Request validation error on {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"message": message, "kind": "validation", "correlation_id": correlation_id}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    logger.error(f"[{correlation_id}] Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

    content = {"message": "Internal server error", "correlation_id": correlation_id}
    if settings.is_development:
        content["error"] = str(exc)
        content["type"] = type(exc).__name__
    return JSONResponse(status_code=500, content=content)


# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Mentorship Admin API",
        "version": "1.0.0",
        "environment": settings.environment,
        "docs_url": "/docs" if settings.is_development else None,
        "health_check": "/health",
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info" if settings.is_development else "warning"
    )
