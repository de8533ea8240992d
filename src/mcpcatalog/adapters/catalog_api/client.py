"""HTTP loader for the remote products API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from mcpcatalog.adapters.http_resilience import ResilienceConfig, ResilientClient
from mcpcatalog.adapters.records import ProductsResponse, parse_records
from mcpcatalog.config.catalog import CatalogApiConfig
from mcpcatalog.domain.model import Origin
from mcpcatalog.domain.ports import SourceLoader, SourceLoadResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from mcpcatalog.domain.ports import RawRecords

log = getLogger(__name__)

PRODUCTS_PATH = "/products"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class SourceUnavailableError(RuntimeError):
    """Raised when the products API cannot supply a usable record list."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class RemoteCatalogLoader:
    """One bounded ``GET /products`` per call; failures become a failed result."""

    config: CatalogApiConfig = field(default_factory=CatalogApiConfig)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> SourceLoadResult:
        try:
            records = asyncio.run(self._fetch_products_async())
        except SourceUnavailableError as exc:
            log.warning("Remote catalog unavailable: %s", exc)
            return SourceLoadResult.unavailable(Origin.REMOTE, str(exc))
        log.info("Loaded %s records from %s", len(records), self.config.base_url)
        return SourceLoadResult(origin=Origin.REMOTE, records=records)

    async def _fetch_products_async(self) -> RawRecords:
        async with self.client_factory(self.config.resilience) as client:
            payload = await self._perform_request(client=client)

        try:
            response = ProductsResponse.model_validate(payload)
        except ValidationError as exc:
            raise SourceUnavailableError("Unexpected products payload shape") from exc

        records = parse_records(response.products, origin=Origin.REMOTE)
        if not records:
            raise SourceUnavailableError("Products API returned no usable records")
        return records

    async def _perform_request(self, *, client: ResilientClient) -> object:
        url = f"{self.config.base_url.rstrip('/')}{PRODUCTS_PATH}"
        params = httpx.QueryParams({"limit": self.config.limit})
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise SourceUnavailableError(f"Timed out fetching {url}") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise SourceUnavailableError(
                f"{url} answered HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(f"Request to {url} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise SourceUnavailableError("Products API returned invalid JSON") from exc


if TYPE_CHECKING:
    _loader_check: SourceLoader = RemoteCatalogLoader()
