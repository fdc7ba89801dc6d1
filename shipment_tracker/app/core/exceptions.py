"""
Custom exceptions and error handlers for consistent error responses.

Provides standardized error codes and global exception handlers.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from typing import Any, Dict

logger = logging.getLogger("shipment_tracker.errors")


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id}
        )


class SchemaOrderError(AppException):
    """Raised when a table would be created before a table it references."""
    
    def __init__(self, table: str, missing_parent: str):
        super().__init__(
            message=f"Table {table} references {missing_parent}, which is not created before it",
            error_code="ERR_SCHEMA_001",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"table": table, "missing_parent": missing_parent}
        )
        self.table = table
        self.missing_parent = missing_parent


class ConstraintViolationError(AppException):
    """
    Raised when the database engine rejects a write on a constraint.
    
    kind is one of FOREIGN_KEY, UNIQUE, NOT_NULL or INTEGRITY.
    """
    
    ERROR_CODES = {
        "FOREIGN_KEY": "ERR_CONSTRAINT_FK",
        "UNIQUE": "ERR_CONSTRAINT_UNIQUE",
        "NOT_NULL": "ERR_CONSTRAINT_NOT_NULL",
        "INTEGRITY": "ERR_CONSTRAINT_001",
    }
    
    def __init__(self, kind: str, table: str, engine_message: str):
        self.kind = kind
        self.table = table
        super().__init__(
            message=f"{kind.replace('_', ' ').title()} constraint violated on {table}",
            error_code=self.ERROR_CODES.get(kind, "ERR_CONSTRAINT_001"),
            status_code=status.HTTP_409_CONFLICT,
            details={"table": table, "kind": kind, "engine_message": engine_message}
        )

    @classmethod
    def from_integrity_error(cls, exc: IntegrityError, table: str) -> "ConstraintViolationError":
        """Classify an engine IntegrityError by its reported message."""
        engine_message = str(exc.orig) if exc.orig is not None else str(exc)
        text = engine_message.lower()
        if "foreign key" in text:
            kind = "FOREIGN_KEY"
        elif "not null" in text or "not-null" in text:
            kind = "NOT_NULL"
        elif "unique" in text or "duplicate key" in text:
            kind = "UNIQUE"
        else:
            kind = "INTEGRITY"
        return cls(kind=kind, table=table, engine_message=engine_message)


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    # Map status code to error code
    error_code_map = {
        400: "ERR_BAD_REQUEST",
        404: "ERR_NOT_FOUND",
        405: "ERR_METHOD_NOT_ALLOWED",
        500: "ERR_INTERNAL_SERVER"
    }
    
    error_code = error_code_map.get(exc.status_code, "ERR_UNKNOWN")
    
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": exc.detail,
            "details": {}
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "ERR_VALIDATION",
            "message": "Validation error",
            "details": {
                "errors": exc.errors()
            }
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception: %s: %s", type(exc).__name__, exc)
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "ERR_INTERNAL_SERVER",
            "message": "An internal server error occurred",
            "details": {}
        }
    )
