"""
Structured error response body (RFC 7807 problem details).

Built fresh for every failed request; never persisted or reused.
"""

from pydantic import BaseModel, Field

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ErrorResponse(BaseModel):
    """Problem details returned for every failed request.

    Attributes:
        type: URI reference identifying the problem type.
        title: Short summary of the problem type.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: Path of the request that failed.
        errors: Field name mapped to failure messages (validation only).
        trace_id: Correlates the response with server logs.
    """

    type: str
    title: str
    status: int
    detail: str
    instance: str
    errors: dict[str, list[str]] | None = None
    trace_id: str = Field(serialization_alias="traceId")

    def to_body(self) -> dict:
        """Serialize to the JSON wire shape (``errors`` omitted when absent)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
