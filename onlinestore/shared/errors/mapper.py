"""
Failure-to-response mapping.

Pure translation of a failure into ``(status_code, ErrorResponse)``.
The dispatch covers the closed set of failure kinds and routes any
other exception to the internal-error branch, so it never raises.
Each mapping is also logged: WARNING for client failures, ERROR for
unclassified ones.
"""

import logging
import traceback

from onlinestore.domain.errors import (
    BadRequestError,
    NotFoundError,
    UnclassifiedError,
    ValidationFailedError,
)
from onlinestore.shared.errors.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

TYPE_BAD_REQUEST = "https://tools.ietf.org/html/rfc7231#section-6.5.1"
TYPE_NOT_FOUND = "https://tools.ietf.org/html/rfc7231#section-6.5.4"
TYPE_INTERNAL_ERROR = "https://tools.ietf.org/html/rfc7231#section-6.6.1"

TITLE_NOT_FOUND = "Not Found"
TITLE_BAD_REQUEST = "Bad Request"
TITLE_VALIDATION_ERROR = "Validation Error"
TITLE_INTERNAL_ERROR = "An error occurred while processing your request"
GENERIC_INTERNAL_DETAIL = "An error occurred while processing your request."


class ErrorMapper:
    """Maps failures to structured error responses.

    Args:
        reveal_details: Include full diagnostics (exception type, message
            and traceback) in 500 responses. Enable only in development.
    """

    def __init__(self, reveal_details: bool = False) -> None:
        self._reveal_details = reveal_details

    def map(
        self, failure: BaseException, trace_id: str, request_path: str
    ) -> tuple[int, ErrorResponse]:
        """Translate ``failure`` into a status code and response body."""
        if isinstance(failure, NotFoundError):
            logger.warning("Not found error: %s", failure.message)
            return HTTP_404, ErrorResponse(
                type=TYPE_NOT_FOUND,
                title=TITLE_NOT_FOUND,
                status=HTTP_404,
                detail=failure.message,
                instance=request_path,
                trace_id=trace_id,
            )

        if isinstance(failure, BadRequestError):
            logger.warning("Bad request error: %s", failure.message)
            return HTTP_400, ErrorResponse(
                type=TYPE_BAD_REQUEST,
                title=TITLE_BAD_REQUEST,
                status=HTTP_400,
                detail=failure.message,
                instance=request_path,
                trace_id=trace_id,
            )

        if isinstance(failure, ValidationFailedError):
            logger.warning(
                "Validation error: %s fields=%s", failure.message, list(failure.errors)
            )
            return HTTP_400, ErrorResponse(
                type=TYPE_BAD_REQUEST,
                title=TITLE_VALIDATION_ERROR,
                status=HTTP_400,
                detail=failure.message,
                errors={field: list(messages) for field, messages in failure.errors.items()},
                instance=request_path,
                trace_id=trace_id,
            )

        return HTTP_500, self._internal_error(failure, trace_id, request_path)

    def _internal_error(
        self, failure: BaseException, trace_id: str, request_path: str
    ) -> ErrorResponse:
        if isinstance(failure, UnclassifiedError):
            operation, cause = failure.operation, failure.cause
        else:
            operation, cause = "operation", failure

        logger.error(
            "Unhandled exception during %s: %s",
            operation,
            cause,
            exc_info=(type(cause), cause, cause.__traceback__),
        )

        detail = (
            _describe(cause) if self._reveal_details else GENERIC_INTERNAL_DETAIL
        )
        return ErrorResponse(
            type=TYPE_INTERNAL_ERROR,
            title=TITLE_INTERNAL_ERROR,
            status=HTTP_500,
            detail=detail,
            instance=request_path,
            trace_id=trace_id,
        )


def _describe(exc: BaseException) -> str:
    """Full diagnostic text: type, message and traceback when available."""
    return "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__)
    ).rstrip()
