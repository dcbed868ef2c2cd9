"""
Pokemon TCG API client.

Implements the generic query engine (find / _where / all) over every
catalog resource kind, on top of a shared httpx.AsyncClient.

Filter arguments are passed per call, so one Client can serve concurrent
queries.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

import httpx
from pydantic import BaseModel, ValidationError

from ..config import Settings, settings as default_settings
from ..interfaces.query import IQuery, Resource
from ..models.envelopes import MultiEnvelope, SingleEnvelope
from ..models.errors import ApiKeyNotFound, InvalidArgument, InvalidEndpoint
from ..models.query import PagedResult, QueryOutcome, QueryResult
from ..models.resource import ResourceKind

logger = logging.getLogger(__name__)


class Client(IQuery):
    """
    Interacts with the Pokemon TCG API via a developer API key.

    Every request carries the X-Api-Key and User-Agent headers. Query-time
    failures never raise: find returns None and all returns whatever was
    decoded before the failure. Use lookup / collect to learn why.
    """

    def __init__(
        self,
        key: str,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Create a client for the provided API key.

        Args:
            key: Pokemon TCG developer API key
            settings: Client settings (defaults to the environment settings)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests

        Raises:
            ApiKeyNotFound: if key is empty
            InvalidEndpoint: if the configured base URL is not absolute http(s)
        """
        if not key:
            raise ApiKeyNotFound()

        self.settings = settings or default_settings
        self.key = key

        try:
            base_url = httpx.URL(self.settings.base_url)
        except httpx.InvalidURL:
            raise InvalidEndpoint(url=self.settings.base_url) from None
        if base_url.scheme not in ("http", "https") or not base_url.host:
            raise InvalidEndpoint(url=self.settings.base_url)

        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "X-Api-Key": key,
                "User-Agent": self.settings.user_agent,
            },
            timeout=self.settings.timeout,
            transport=transport,
        )

    @classmethod
    def from_env(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "Client":
        """
        Create a client from the POKEMON_TCG_API_KEY setting.

        Raises:
            ApiKeyNotFound: if no key is configured
        """
        settings = settings or default_settings
        if not settings.api_key:
            raise ApiKeyNotFound()
        return cls(settings.api_key, settings=settings, transport=transport)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Client(base_url={self.settings.base_url!r})"

    # Query engine

    async def find(self, resource: Resource, id: str) -> Optional[BaseModel]:
        return (await self.lookup(resource, id)).data

    async def lookup(self, resource: Resource, id: str) -> QueryResult:
        """
        Look up a single resource by id and report the outcome.

        Args:
            resource: Resource kind (ResourceKind, model class or path segment)
            id: Identifier, escaped into one path segment without validation

        Returns:
            QueryResult with the unwrapped payload when outcome is OK
        """
        kind = ResourceKind.of(resource)

        if not kind.supports_find:
            logger.debug(f"No lookup by id for {kind.path}, skipping request for '{id}'")
            return QueryResult(outcome=QueryOutcome.UNSUPPORTED)

        outcome, response, detail = await self._get(kind.item_path(id))
        if response is None:
            return QueryResult(outcome=outcome, detail=detail)

        try:
            envelope = SingleEnvelope[kind.model].model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Could not decode {kind.path}/{id}: {e.error_count()} validation error(s)")
            return QueryResult(outcome=QueryOutcome.DECODE_ERROR, detail=str(e))

        return QueryResult(outcome=QueryOutcome.OK, data=envelope.data)

    async def _where(self, resource: Resource, args: Mapping[str, str]) -> List[BaseModel]:
        return await self.all(resource, args)

    where = _where

    async def all(self, resource: Resource, args: Optional[Mapping[str, str]] = None) -> List[BaseModel]:
        return (await self.collect(resource, args)).data

    async def collect(self, resource: Resource, args: Optional[Mapping[str, str]] = None) -> PagedResult:
        """
        Fetch a collection, following pages, and report how the fetch ended.

        With a "page" key in args exactly one request is made. Otherwise the
        first request carries args unchanged and later requests add page=2,
        3, ... until a page comes back empty, totalCount is reached,
        or settings.max_pages pages were fetched. Without a totalCount a
        page shorter than the reported (or requested) pageSize also ends it.

        Args:
            resource: Resource kind (ResourceKind, model class or path segment)
            args: Optional query-string filters

        Returns:
            PagedResult holding the items decoded so far

        Raises:
            InvalidArgument: if pageSize is not a positive integer while paging
        """
        kind = ResourceKind.of(resource)
        params: Dict[str, str] = dict(args or {})
        fetch_all = self.settings.fetch_all_pages and "page" not in params
        page_size = self._page_size(params) if fetch_all else 0
        envelope_type = MultiEnvelope[kind.model]

        result = PagedResult()
        page = 1
        while True:
            query = dict(params)
            if page > 1:
                query["page"] = str(page)

            outcome, response, detail = await self._get(kind.collection_path(), query)
            if response is None:
                result.outcome, result.detail = outcome, detail
                break

            try:
                envelope = envelope_type.model_validate_json(response.content)
            except ValidationError as e:
                logger.warning(f"Could not decode page {page} of {kind.path}: {e.error_count()} validation error(s)")
                result.outcome, result.detail = QueryOutcome.DECODE_ERROR, str(e)
                break

            result.data.extend(envelope.data)
            result.pages += 1

            if not fetch_all or not envelope.data:
                break
            # Upstream caps pageSize at 250 and reports the size it used
            served_size = envelope.page_size or page_size
            if envelope.total_count is not None:
                if len(result.data) >= envelope.total_count:
                    break
            elif len(envelope.data) < served_size:
                break
            if self.settings.max_pages and result.pages >= self.settings.max_pages:
                logger.info(f"Stopping {kind.path} after {result.pages} page(s) (max_pages)")
                break
            page += 1

        logger.debug(f"Fetched {len(result.data)} {kind.path} in {result.pages} page(s): {result.outcome.value}")
        return result

    # Helpers

    def _page_size(self, params: Mapping[str, str]) -> int:
        value = params.get("pageSize")
        if value is None:
            return self.settings.page_size
        try:
            size = int(value)
        except (TypeError, ValueError):
            raise InvalidArgument(arg=f"pageSize={value}") from None
        if size < 1:
            raise InvalidArgument(arg=f"pageSize={value}")
        return size

    async def _get(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None
    ) -> Tuple[QueryOutcome, Optional[httpx.Response], Optional[str]]:
        """Issue a GET and classify transport-level and HTTP-status failures"""
        try:
            # No query string at all when there are no params
            response = await self.client.get(path, params=params or None)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {path} failed: {e!r}")
            return QueryOutcome.TRANSPORT_ERROR, None, str(e) or type(e).__name__

        if response.status_code == 404:
            logger.debug(f"{path} not found")
            return QueryOutcome.NOT_FOUND, None, "HTTP 404"
        if response.is_error:
            logger.warning(f"Request to {path} returned HTTP {response.status_code}")
            return QueryOutcome.TRANSPORT_ERROR, None, f"HTTP {response.status_code}"

        return QueryOutcome.OK, response, None
