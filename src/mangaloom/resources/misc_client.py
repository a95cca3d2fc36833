# mangaloom/resources/misc_client.py
"""Client for the smaller MangaDex endpoints.

Groups the MangaDex@Home server lookup, legacy id mapping, reports and
captcha solving.
"""

from uuid import UUID

from ..models.at_home import AtHomeQuery, AtHomeServer
from ..models.legacy import LegacyMappingRequest, MappingType
from ..models.report import CreateReport, ReportCategory, SolveCaptcha
from ..unwrapper import Envelope, Page
from .base_client import BaseResourceClient


class MiscClient(BaseResourceClient):
    async def at_home_server(
        self, chapter_id: UUID | str, *, force_port_443: bool | None = None
    ) -> AtHomeServer:
        """Image server to download the pages of `chapter_id` from."""
        return await self._call(
            "at_home.server",
            chapter_id=chapter_id,
            query=AtHomeQuery(forcePort443=force_port_443),
        )

    async def legacy_mapping(
        self, mapping_type: MappingType, ids: list[int]
    ) -> list[Envelope]:
        """Translate legacy numeric ids; each element holds a `MappingIdData`."""
        return await self._call(
            "legacy.mapping", body=LegacyMappingRequest(type=mapping_type, ids=ids)
        )

    async def report_reasons(
        self,
        category: ReportCategory,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Page:
        return await self._call(
            "report.reasons",
            category=category,
            query={"limit": limit, "offset": offset},
        )

    async def create_report(self, report: CreateReport) -> None:
        await self._call("report.create", body=report)

    async def solve_captcha(self, challenge: str) -> None:
        await self._call("captcha.solve", body=SolveCaptcha(captchaChallenge=challenge))
