from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.exceptions import (
    SubgraphQueryError,
    SubgraphResponseError,
    SubgraphTransportError,
)
from pool_tags.infrastructure.mappers.pool_mapper import map_row_to_pool


logger = logging.getLogger(__name__)


PAGE_SIZE = 1000

POOLS_QUERY = """
query GetPools($lastTimestamp: Int) {
  pools(
    first: 1000,
    orderBy: createTime,
    orderDirection: asc,
    where: { createTime_gt: $lastTimestamp }
  ) {
    address
    symbol
    createTime
    poolType
    tokens {
      symbol
      name
    }
  }
}
"""

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class BalancerSubgraphClientSettings:
    timeout_seconds: float


def next_cursor(page: list[Pool], page_size: int = PAGE_SIZE) -> int | None:
    """Cursor for the following round, or None when ``page`` is the last one."""
    if len(page) != page_size:
        return None
    return page[-1].create_time


class BalancerSubgraphClient:
    def __init__(
        self,
        settings: BalancerSubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def fetch_pools(self, url: str) -> list[Pool]:
        pools: list[Pool] = []
        cursor: int | None = 0
        pages = 0

        while cursor is not None:
            page = self._fetch_page(url=url, last_timestamp=cursor)
            pages += 1
            pools.extend(page)
            logger.info(
                "balancer_subgraph_client: fetched_page page=%s rows=%s last_timestamp=%s",
                pages,
                len(page),
                cursor,
            )
            following = next_cursor(page)
            if following is not None and following <= cursor:
                logger.warning(
                    "balancer_subgraph_client: cursor_not_advancing page=%s last_timestamp=%s next_timestamp=%s",
                    pages,
                    cursor,
                    following,
                )
                raise SubgraphResponseError(
                    "Subgraph pagination stalled: createTime did not advance "
                    f"past {cursor} (got {following})."
                )
            cursor = following

        logger.info(
            "balancer_subgraph_client: fetched_pools fetched=%s pages=%s",
            len(pools),
            pages,
        )
        return pools

    def _fetch_page(self, *, url: str, last_timestamp: int) -> list[Pool]:
        payload = self._post_graphql(
            url=url,
            query=POOLS_QUERY,
            variables={"lastTimestamp": last_timestamp},
        )
        data = payload.get("data")
        rows = data.get("pools") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise SubgraphResponseError("Subgraph response is missing data.pools.")
        try:
            return [map_row_to_pool(row) for row in rows]
        except (AttributeError, TypeError, ValueError) as exc:
            raise SubgraphResponseError(f"Malformed pool row: {exc}") from exc

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    json={"query": query, "variables": variables},
                    headers=REQUEST_HEADERS,
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SubgraphTransportError(
                f"HTTP error! status: {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SubgraphTransportError(f"Request failed: {exc}") from exc
        except ValueError as exc:
            raise SubgraphResponseError("Subgraph response is not valid JSON.") from exc

        if not isinstance(payload, dict):
            raise SubgraphResponseError("Subgraph response is not a JSON object.")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        if errors:
            messages = [
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            ]
            for message in messages:
                logger.error("balancer_subgraph_client: graphql_error message=%s", message)
            raise SubgraphQueryError(messages)

        return payload
