"""Structured error records returned inside `"error"` envelopes."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ApiErrorRecord(BaseModel):
    """One entry of the `errors` array of an error envelope.

    Attributes:
        id: The error id.
        status: The HTTP status echoed by the API.
        title: Short error title.
        detail: Details about the error.
    """

    id: UUID
    status: int
    title: str | None = None
    detail: str | None = None

    model_config = ConfigDict(extra="allow", frozen=True)
