"""Models for the MangaDex@Home image server lookup."""

from pydantic import BaseModel, ConfigDict


class AtHomeServer(BaseModel):
    """Image server assigned to a chapter. The response is not enveloped."""

    baseUrl: str

    model_config = ConfigDict(extra="allow")


class AtHomeQuery(BaseModel):
    forcePort443: bool | None = None

    model_config = ConfigDict(extra="forbid")
