"""Models for report reasons, user reports and captcha solving."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .common import ApiData, ApiObject, LenientLocalizedString


class ReportCategory(str, Enum):
    MANGA = "manga"
    CHAPTER = "chapter"
    SCANLATION_GROUP = "scanlation_group"
    USER = "user"


class ReportAttributes(BaseModel):
    reason: LenientLocalizedString
    detailsRequired: bool
    category: ReportCategory
    version: int

    model_config = ConfigDict(extra="allow")


Report = ApiObject[ReportAttributes]
ReportData = ApiData[Report]


class CreateReport(BaseModel):
    """Body of `POST /report`.

    `reason` is the id of one of the reasons listed for `category`.
    """

    category: ReportCategory
    reason: UUID
    objectId: UUID
    details: str | None = None

    model_config = ConfigDict(extra="forbid")


class SolveCaptcha(BaseModel):
    captchaChallenge: str

    model_config = ConfigDict(extra="forbid")
