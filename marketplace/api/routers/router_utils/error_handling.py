"""
Domain error handling for API endpoints.

Decorator that turns marketplace exceptions into HTTPExceptions so every
router maps the access decision taxonomy the same way:
NotFound -> 404, Forbidden -> 403 with the reason as detail.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from marketplace.core.exceptions import (
    AccessForbiddenError,
    AlreadyEnrolledError,
    AlreadySubmittedError,
    InvalidOperationError,
    ResourceNotFoundError,
    ValidationError,
)
from marketplace.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_domain_errors(func: F) -> F:
    """
    Decorator to map domain errors raised by services to HTTP responses.

    Centralizes:
    - Logging of expected denials at WARNING, unexpected failures with traceback
    - Mapping specific exceptions to HTTP status codes
    - Hiding infrastructure error details behind a generic 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ResourceNotFoundError as e:
            logger.warning("Resource not found", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except AccessForbiddenError as e:
            logger.warning("Access forbidden", extra={"error": str(e), "reason": e.reason})
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.reason)

        except AlreadyEnrolledError as e:
            logger.warning("Duplicate enrollment", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except AlreadySubmittedError as e:
            logger.warning("Duplicate submission", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except (InvalidOperationError, ValidationError) as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=422,
                detail=e.errors(),
            )

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in API operation",
                e,
                endpoint=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
