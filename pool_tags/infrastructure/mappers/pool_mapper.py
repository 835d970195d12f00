from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pool_tags.domain.entities.pool import Pool, Token


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def map_row_to_token(row: Any) -> Token:
    if not isinstance(row, Mapping):
        return Token(symbol="", name="")
    return Token(symbol=_text(row.get("symbol")), name=_text(row.get("name")))


def map_row_to_pool(row: Mapping[str, Any]) -> Pool:
    create_time = row.get("createTime")
    if create_time is None or create_time == "":
        raise ValueError(f"createTime is missing for pool {row.get('address')!r}")
    raw_tokens = row.get("tokens")
    tokens = raw_tokens if isinstance(raw_tokens, list) else []
    return Pool(
        address=_text(row.get("address")),
        symbol=_text(row.get("symbol")),
        create_time=int(create_time),
        pool_type=_text(row.get("poolType")),
        tokens=tuple(map_row_to_token(token) for token in tokens),
    )
