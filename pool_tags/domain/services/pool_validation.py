from __future__ import annotations

import re
from dataclasses import dataclass

from pool_tags.domain.entities.pool import Pool


MARKUP_PATTERN = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class PoolValidation:
    accepted: bool
    reason: str | None = None


def contains_markup(value: str) -> bool:
    return MARKUP_PATTERN.search(value) is not None


def _field_problem(value: str, field_name: str) -> str | None:
    if not value:
        return f"{field_name} is empty"
    if contains_markup(value):
        return f"{field_name} contains markup"
    return None


def validate_pool(pool: Pool) -> PoolValidation:
    checks = [
        (pool.pool_type, "poolType"),
        (pool.symbol, "symbol"),
    ]
    for idx, token in enumerate(pool.tokens):
        checks.append((token.symbol, f"tokens[{idx}].symbol"))
        checks.append((token.name, f"tokens[{idx}].name"))

    for value, field_name in checks:
        problem = _field_problem(value, field_name)
        if problem is not None:
            return PoolValidation(accepted=False, reason=problem)
    return PoolValidation(accepted=True)
