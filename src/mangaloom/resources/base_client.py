# mangaloom/resources/base_client.py
"""Defines the base class for all MangaDex resource clients."""

from collections.abc import AsyncIterator, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from ..constants import DEFAULT_PAGE_SIZE
from ..endpoints import bind
from ..exceptions import ApiError
from ..log_config import logger
from ..unwrapper import Err, Page

if TYPE_CHECKING:
    from ..client import MangaloomClient


class BaseResourceClient:
    """Base class for all resource clients.

    Resource methods are thin wrappers that bind a row of the endpoint table
    and hand it to `MangaloomClient.dispatch`.
    """

    def __init__(self, api_client: "MangaloomClient"):
        """
        Initialize the base resource client.

        Args:
            api_client: An instance of MangaloomClient.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")

    async def _call(self, name: str, **kwargs: Any) -> Any:
        return await self._api_client.dispatch(bind(name, **kwargs))

    async def _iterate(
        self,
        name: str,
        query: BaseModel | Mapping[str, Any] | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        **path_params: Any,
    ) -> AsyncIterator[Any]:
        """Walk an offset-paginated listing and yield each element's payload.

        The `limit`/`offset` of `query` are overridden page by page. An error
        element inside a page raises `ApiError`.
        """
        offset = 0
        logger.info(f"Iterating {name}: page_size={page_size}")
        while True:
            page_query = _with_page(query, limit=page_size, offset=offset)
            page: Page = await self._call(name, query=page_query, **path_params)
            for item in page.results:
                if isinstance(item, Err):
                    raise ApiError(
                        f"Error element in page of {name} at offset {page.offset}",
                        errors=item.errors,
                    )
                yield item.value

            if page.next_offset is None or not page.results:
                logger.debug(f"No more results for {name}, stopping iteration.")
                break
            offset = page.next_offset


def _with_page(
    query: BaseModel | Mapping[str, Any] | None, *, limit: int, offset: int
) -> BaseModel | dict[str, Any]:
    if isinstance(query, BaseModel):
        return query.model_copy(update={"limit": limit, "offset": offset})
    return {**(query or {}), "limit": limit, "offset": offset}
