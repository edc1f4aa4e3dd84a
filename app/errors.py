"""Domain errors and their HTTP rendering."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ConflictError(Exception):
    """A write collides with existing rows (restricted delete, duplicate month)."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.warning(f"Conflict on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=409, content={"detail": exc.detail})


def register_error_handlers(app: FastAPI) -> None:
    """Attach domain error handlers to the application."""
    app.add_exception_handler(ConflictError, conflict_error_handler)
