from __future__ import annotations

from collections.abc import Mapping
import logging

from pool_tags.application.dto.return_tags import ReturnTagsInput, ReturnTagsOutput
from pool_tags.application.ports.pool_source_port import PoolSourcePort
from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.entities.tag import Tag
from pool_tags.domain.exceptions import SubgraphError, TagFetchError
from pool_tags.domain.services.endpoints import resolve_endpoint
from pool_tags.domain.services.pool_validation import validate_pool
from pool_tags.domain.services.tag_builder import build_tag


logger = logging.getLogger(__name__)


class ReturnTagsUseCase:
    def __init__(self, *, pool_source: PoolSourcePort, endpoint_registry: Mapping[str, str]):
        self._pool_source = pool_source
        self._endpoint_registry = endpoint_registry

    def execute(self, command: ReturnTagsInput) -> ReturnTagsOutput:
        url = resolve_endpoint(command.network_id, command.api_key, self._endpoint_registry)

        try:
            pools = self._pool_source.fetch_pools(url)
        except SubgraphError as exc:
            raise TagFetchError(f"Failed fetching data: {exc}") from exc
        except Exception as exc:
            raise TagFetchError("An unknown error occurred while fetching data.") from exc

        tags: list[Tag] = []
        for pool in pools:
            validation = validate_pool(pool)
            if not validation.accepted:
                _log_rejected(command.network_id, pool, validation.reason)
                continue
            tags.append(build_tag(command.network_id, pool))

        logger.info(
            "return_tags: built_tags network_id=%s fetched=%s accepted=%s rejected=%s",
            command.network_id,
            len(pools),
            len(tags),
            len(pools) - len(tags),
        )
        return ReturnTagsOutput(
            network_id=command.network_id,
            fetched=len(pools),
            rejected=len(pools) - len(tags),
            tags=tags,
        )


def _log_rejected(network_id: str, pool: Pool, reason: str | None) -> None:
    logger.warning(
        "return_tags: pool_rejected network_id=%s reason=%s pool=%r",
        network_id,
        reason,
        pool,
    )
