from __future__ import annotations

from dataclasses import dataclass

from pool_tags.domain.entities.tag import Tag


@dataclass(frozen=True)
class ReturnTagsInput:
    network_id: str
    api_key: str


@dataclass(frozen=True)
class ReturnTagsOutput:
    network_id: str
    fetched: int
    rejected: int
    tags: list[Tag]
