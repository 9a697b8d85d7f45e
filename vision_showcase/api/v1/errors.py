"""Translation of application exceptions into HTTP errors."""
import logging

from fastapi import HTTPException, status

from ...core.exceptions import (
    NotFoundError,
    TrainingJobStateError,
    UploadTooLargeError,
    ValidationError,
    get_user_message,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: Exception) -> HTTPException:
    """
    Map an exception raised by a use case to the HTTPException to send.

    Unexpected exceptions are logged with their traceback and become a 500
    with a generic message.
    """
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, UploadTooLargeError):
        return HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=get_user_message(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=get_user_message(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=get_user_message(exc))
    if isinstance(exc, TrainingJobStateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=get_user_message(exc))

    logger.error(f"Unhandled error while serving request: {exc}", exc_info=True)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=get_user_message(exc))
