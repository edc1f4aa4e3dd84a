"""HTTP client for the kitchen manager API.

Used by the dashboard report to read live data. The three collections the
dashboard needs are fetched in parallel; there is no ordering dependency
between them.

Usage:
    async with KitchenApiClient("http://localhost:3000") as client:
        data = await client.fetch_dashboard_data()
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class KitchenApiError(Exception):
    """Raised when the API cannot be reached or answers with an error."""


@dataclass
class DashboardData:
    """Raw collections backing the dashboard."""

    inventory: list[dict[str, Any]] = field(default_factory=list)
    recipes: list[dict[str, Any]] = field(default_factory=list)
    transactions: list[dict[str, Any]] = field(default_factory=list)


class KitchenApiClient:
    """Thin async wrapper over the REST endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "KitchenApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def get_http_client(self) -> httpx.AsyncClient:
        """Get or create the underlying HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._http_client

    async def _get_json(self, path: str) -> Any:
        client = await self.get_http_client()
        try:
            response = await client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"GET {path} failed: {e}")
            raise KitchenApiError(f"GET {path} failed: {e}") from e
        return response.json()

    async def list_inventory(self) -> list[dict[str, Any]]:
        return await self._get_json("/inventory")

    async def list_recipes(self) -> list[dict[str, Any]]:
        return await self._get_json("/recipes")

    async def list_finance(self) -> list[dict[str, Any]]:
        return await self._get_json("/finance")

    async def fetch_dashboard_data(self) -> DashboardData:
        """Fetch inventory, recipes and finance records concurrently."""
        inventory, recipes, transactions = await asyncio.gather(
            self.list_inventory(),
            self.list_recipes(),
            self.list_finance(),
        )
        logger.info(
            f"Fetched {len(inventory)} inventory items, {len(recipes)} recipes, "
            f"{len(transactions)} transactions"
        )
        return DashboardData(inventory=inventory, recipes=recipes, transactions=transactions)

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
