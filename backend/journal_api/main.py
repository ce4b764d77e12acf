"""
FastAPI entrypoint for the Journal backend application.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from journal_api.core.config import settings
from journal_api.core.constants import ERROR_MESSAGES
from journal_api.core.exceptions import InternalError
from journal_api.core.utils import format_error
from journal_api.schemas.common import FieldError
from journal_api.api.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Backend API for personal journaling",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _field_name(loc) -> str:
    """Turn a pydantic error location like ('body', 'tags', 0) into 'tags.0'."""
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path", "header", "cookie"):
        parts = parts[1:]
    return ".".join(parts)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render raised HTTP errors in the response envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error(str(exc.detail), getattr(exc, "errors", None)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 with per-field messages."""
    errors = [
        FieldError(field=_field_name(err.get("loc", ())), message=err.get("msg", "")).model_dump()
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error(ERROR_MESSAGES["VALIDATION_FAILED"], errors),
    )


def _internal_error_response(exc: Exception) -> JSONResponse:
    """Generic 500 envelope; the exception text is only included when DEBUG is on."""
    error = InternalError()
    return JSONResponse(
        status_code=error.status_code,
        content=format_error(error.message, detail=str(exc) if settings.DEBUG else None),
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Store failures become a generic 500; details stay in the log unless DEBUG."""
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return _internal_error_response(exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _internal_error_response(exc)


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"success": True, "message": f"{settings.APP_NAME} API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
