# reliefhub/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error answered with ``status_code`` and a fixed JSON body."""

    def __init__(self, status_code: int, payload: dict):
        super().__init__(payload)
        self.status_code = status_code
        self.payload = payload


def not_found(entity: str) -> ApiError:
    return ApiError(404, {"error": f"{entity} not found"})


async def _api_error(request: Request, exc: ApiError):
    return JSONResponse(exc.payload, status_code=exc.status_code)


async def _validation_error(request: Request, exc: RequestValidationError):
    # "ctx" can hold exception objects and "input" non-finite floats
    detail = [{k: v for k, v in e.items() if k not in ("ctx", "input")} for e in exc.errors()]
    return JSONResponse({"error": "Invalid request body", "detail": detail}, status_code=400)


async def _unhandled(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled)
