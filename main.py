# Essential imports
import asyncio
import time
from contextlib import asynccontextmanager, suppress
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from routers import users, lists, tasks

# Import all models for SQLAlchemy relationship resolution
import models  # This triggers the imports in models/__init__.py
from core.database import Base, engine
from core.exceptions import AppError

# Rate limiter imports
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from middleware.rate_limiter import limiter

# Logging imports
from core.logging_config import setup_logging, get_logger
from middleware import RequestIDMiddleware, get_request_id
from core.config import settings
from services.session_service import run_session_sweeper
from utils.logger import log_request

# CORS imports
from fastapi.middleware.cors import CORSMiddleware

# Initialize logging
setup_logging(
    log_level=settings.LOG_LEVEL,
    log_dir=settings.LOG_DIR
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)

    sweeper = None
    if settings.SESSION_SWEEP_INTERVAL_MINUTES > 0:
        sweeper = asyncio.create_task(run_session_sweeper(settings.SESSION_SWEEP_INTERVAL_MINUTES))

    logger.info("Application startup complete", extra={"event": "startup"})
    yield

    if sweeper is not None:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
    logger.info("Application shutting down", extra={"event": "shutdown"})


app = FastAPI(
    title="Task Manager API",
    description="Lists and tasks with access/refresh token authentication",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


# CORS configuration; tokens travel in headers only, so the browser must be allowed to read them
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-access-token", "x-refresh-token"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log every HTTP request with method, path, status code and duration.
    """
    start_time = time.time()

    response = await call_next(request)

    duration = (time.time() - start_time) * 1000
    client_ip = request.client.host if request.client else "unknown"

    log_request(logger, request.method, request.url.path, response.status_code, duration, client_ip)

    return response


# Add request ID middleware
app.add_middleware(RequestIDMiddleware)


# Health check
@app.get("/health")
async def health_check():
    logger.debug("Health check requested")
    return {"status": "Healthy"}


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Malformed or missing input is a 400 with a readable message.
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"

    logger.debug("Request validation failed", extra={"path": request.url.path, "error": message})

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch all unhandled exceptions, log them with full context and return
    a generic 500 without exposing internals.
    """
    logger.error(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc).__name__,
            "request_id": get_request_id(request)
        },
        exc_info=True
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"}
    )


# Including routers
app.include_router(users.router)
app.include_router(lists.router)
app.include_router(tasks.router)


# Add rate limiter to the app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
