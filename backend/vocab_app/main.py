import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vocab_app.config import get_settings
from vocab_app.database import init_db
from vocab_app.routers import auth, quiz, vocab
from vocab_app.services.errors import (
    InactiveUserError,
    InvalidCredentialsError,
    NoCandidatesError,
    UserAlreadyExistsError,
    WordAccessDeniedError,
    WordNotFoundError,
)

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)
request_logger = logging.getLogger("vocab_app.requests")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    await init_db()
    yield


app = FastAPI(
    title="Vocabulary App API",
    description="Backend for personal vocabulary lists and quizzes",
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS - configurable via ALLOWED_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log status, method, path and latency of every request."""
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = time.perf_counter() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    request_logger.info(
        "[%d] %s %s %.1fms",
        response.status_code,
        request.method,
        request.url.path,
        process_time * 1000,
    )
    return response


# Domain errors -> HTTP status codes
ERROR_STATUS = {
    WordNotFoundError: status.HTTP_404_NOT_FOUND,
    WordAccessDeniedError: status.HTTP_403_FORBIDDEN,
    NoCandidatesError: status.HTTP_404_NOT_FOUND,
    UserAlreadyExistsError: status.HTTP_409_CONFLICT,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    InactiveUserError: status.HTTP_403_FORBIDDEN,
}


async def domain_error_handler(request: Request, exc: Exception):
    status_code = ERROR_STATUS[type(exc)]
    request_logger.debug("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


for error_type in ERROR_STATUS:
    app.add_exception_handler(error_type, domain_error_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error": str(exc) if settings.DEBUG else "An error occurred",
        },
    )


# Include routers
app.include_router(auth.router)
app.include_router(vocab.router)
app.include_router(quiz.router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vocab_app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
