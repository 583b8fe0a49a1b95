"""
FastAPI Application Entry Point
===============================
Main application with lifecycle management, middleware, and route mounting.
"""

from contextlib import asynccontextmanager
from datetime import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sahayak.config import get_settings
from sahayak.core.exceptions import SahayakException
from sahayak.api.routes import chat, schemes, language, health
from sahayak.db.database import init_db, close_db
from sahayak.db.seed import seed_schemes
from sahayak.detection import get_detector
from sahayak.services.llm import LLMService
from sahayak.logging.chat_logger import ChatLogger

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info("Starting Sahayak")
    logger.info("=" * 60)

    # ==================
    # STARTUP
    # ==================

    logger.info("Initializing chat logger...")
    app.state.chat_logger = ChatLogger(str(settings.CHAT_LOG_PATH))
    await app.state.chat_logger.log_system_event("Application starting", {
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    })

    logger.info("Initializing database...")
    await init_db()

    if settings.SEED_SAMPLE_DATA:
        logger.info("Seeding sample schemes...")
        await seed_schemes()

    logger.info("Initializing language detector...")
    app.state.detector = get_detector()

    logger.info("Initializing LLM service...")
    app.state.llm_service = LLMService()
    await app.state.llm_service.initialize()

    logger.info("=" * 60)
    logger.info("Sahayak Ready!")
    logger.info(f"Server: http://{settings.HOST}:{settings.PORT}")
    logger.info(f"Docs: http://{settings.HOST}:{settings.PORT}/docs")
    logger.info("=" * 60)

    await app.state.chat_logger.log_system_event("Application started successfully", {
        "host": settings.HOST,
        "port": settings.PORT,
        "llm_configured": app.state.llm_service.is_initialized
    })

    yield  # Application runs here

    # ==================
    # SHUTDOWN
    # ==================

    logger.info("Shutting down Sahayak...")

    await app.state.chat_logger.log_system_event("Application shutting down", {})

    if hasattr(app.state, 'llm_service'):
        await app.state.llm_service.cleanup()

    await close_db()

    if hasattr(app.state, 'chat_logger'):
        await app.state.chat_logger.close()

    logger.info("Shutdown complete.")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## Sahayak - Welfare Scheme Assistant

    A multilingual assistant that helps citizens discover Indian government welfare schemes.

    ### Features:
    - 💬 Chat in English and 12 Indian languages
    - 🔍 Scheme search by keyword, category and state
    - 🌐 Script/keyword based language detection
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# ==================
# MIDDLEWARE
# ==================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_timing_header(request: Request, call_next):
    """Add request timing information to response headers."""
    start_time = datetime.now()
    response = await call_next(request)
    process_time = (datetime.now() - start_time).total_seconds() * 1000
    response.headers["X-Process-Time-Ms"] = f"{process_time:.2f}"
    logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.0f}ms)")
    return response


# ==================
# EXCEPTION HANDLERS
# ==================

@app.exception_handler(SahayakException)
async def sahayak_exception_handler(request: Request, exc: SahayakException):
    """Handle custom Sahayak exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.message,
            "errorCode": exc.error_code,
            "details": exc.details if (exc.status_code < 500 or settings.DEBUG) else None
        }
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400s."""
    logger.warning(f"VALIDATION_ERROR on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Invalid request",
            "errorCode": "VALIDATION_ERROR",
            "details": {"errors": [
                {"loc": list(e.get("loc", [])), "msg": e.get("msg")} for e in exc.errors()
            ]}
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An unexpected error occurred",
            "errorCode": "INTERNAL_ERROR",
            "details": str(exc) if settings.DEBUG else None
        }
    )


# ==================
# ROUTES
# ==================

app.include_router(health.router, tags=["Health"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])
app.include_router(schemes.router, prefix="/api/schemes", tags=["Schemes"])
app.include_router(language.router, prefix="/api", tags=["Language"])


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health"
    }


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run("sahayak.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
