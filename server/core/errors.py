# server/core/errors.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


log = logging.getLogger("registry.errors")


class RegistryError(Exception):
    """Base class for errors raised by the service."""


class ValidationError(RegistryError):
    """A required field of the request is missing or empty."""


class StoreError(RegistryError):
    """The database could not complete an operation."""


class StartupError(RegistryError):
    """The process cannot start: bad configuration or unreachable database."""


# -------------------------------
# Exception Handlers
# -------------------------------

def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    async def _validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    @app.exception_handler(StoreError)
    async def _store_error_handler(request: Request, exc: StoreError):
        log.error("Store error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc.__cause__ or exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Database error"})

    @app.exception_handler(RequestValidationError)
    async def _request_body_handler(request: Request, exc: RequestValidationError):
        log.info("Rejected request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=422, content={"error": "Invalid request body"})
