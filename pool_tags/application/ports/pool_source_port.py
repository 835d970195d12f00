from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool import Pool


class PoolSourcePort(Protocol):
    def fetch_pools(self, url: str) -> list[Pool]:
        ...
