"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional
from fastapi import HTTPException, status
from loguru import logger


class ServerHelpersException(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class QueryError(ServerHelpersException):
    """A data source query or its payload could not be processed."""

    def __init__(
        self,
        message: Optional[str],
        description: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        self.description = description
        self.data = data or {}
        super().__init__(message or "Query could not be completed", details=self.data)


class ConflictError(ServerHelpersException):
    """A write collided with a unique or foreign key constraint."""
    pass


class DatabaseError(ServerHelpersException):
    """Database operation errors."""
    pass


def handle_query_error(error: QueryError) -> HTTPException:
    """Handle query errors."""
    logger.warning(f"Query error: {error.message} ({error.description})")
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "message": error.message,
            "description": error.description,
            "data": error.data,
        },
    )


def handle_conflict_error(error: ConflictError) -> HTTPException:
    """Handle constraint conflicts."""
    logger.warning(f"Conflict error: {error.message}")
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=error.message,
    )


def handle_database_error(error: Exception) -> HTTPException:
    """Handle database errors and return appropriate HTTP response."""
    logger.error(f"Database error: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database operation failed. Please try again later."
    )
