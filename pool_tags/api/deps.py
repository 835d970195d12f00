from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.services.endpoints import load_endpoint_registry
from pool_tags.infrastructure.clients.balancer_subgraph_client import (
    BalancerSubgraphClient,
    BalancerSubgraphClientSettings,
)
from pool_tags.shared.config import get_settings


def get_endpoint_registry() -> Mapping[str, str]:
    return load_endpoint_registry(get_settings().endpoints_file)


@lru_cache(maxsize=1)
def _get_balancer_subgraph_client() -> BalancerSubgraphClient:
    settings = get_settings()
    return BalancerSubgraphClient(
        BalancerSubgraphClientSettings(
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )


def get_default_api_key() -> str:
    return get_settings().graph_api_key


def get_return_tags_use_case() -> ReturnTagsUseCase:
    return ReturnTagsUseCase(
        pool_source=_get_balancer_subgraph_client(),
        endpoint_registry=get_endpoint_registry(),
    )


def return_tags(network_id: str, api_key: str) -> list[dict[str, str]]:
    """Fetch every Balancer v2 pool on ``network_id`` and return its address tags.

    Records use the output column names (``Contract Address``, ``Public Name Tag``,
    ``Project Name``, ``UI/Website Link``, ``Public Note``).
    """
    output = get_return_tags_use_case().execute(
        ReturnTagsInput(network_id=network_id, api_key=api_key)
    )
    return [tag.as_record() for tag in output.tags]
