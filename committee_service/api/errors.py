"""Map service errors onto HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from committee_service.core.errors import (
    BusinessRuleViolation,
    ConstraintViolation,
    GovernanceValidationError,
    ResourceNotFound,
    TransactionError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error -> status code mapping to an app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"message": "Bad Request"})

    @app.exception_handler(GovernanceValidationError)
    async def validation_handler(request: Request, exc: GovernanceValidationError) -> JSONResponse:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"message": "Bad Request"})

    @app.exception_handler(ResourceNotFound)
    async def not_found_handler(request: Request, exc: ResourceNotFound) -> JSONResponse:
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=404, content={"message": "Resource Not Found"})

    @app.exception_handler(ConstraintViolation)
    async def constraint_handler(request: Request, exc: ConstraintViolation) -> JSONResponse:
        logger.info(f"Conflict on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=409, content={"message": "Conflict", "error": str(exc)})

    @app.exception_handler(BusinessRuleViolation)
    async def business_rule_handler(request: Request, exc: BusinessRuleViolation) -> JSONResponse:
        logger.info(f"Conflict on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=409, content={"message": "Conflict", "error": str(exc)})

    @app.exception_handler(TransactionError)
    async def transaction_handler(request: Request, exc: TransactionError) -> JSONResponse:
        logger.error(f"Database transaction failed on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"message": "Internal Server Error", "error": str(exc)},
        )
