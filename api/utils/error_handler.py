"""Error handling utilities for API endpoints."""

from collections.abc import Callable
from typing import TypeVar

from fastapi import HTTPException, status

from core.exceptions import UnknownInfoPageError

T = TypeVar("T")


def handle_api_operation(operation: Callable[[], T]) -> T:
    """Run an endpoint operation, mapping lookup errors to HTTP errors.

    Database errors propagate to the application's exception handlers.
    """
    try:
        return operation()
    except UnknownInfoPageError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.args[0])
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
