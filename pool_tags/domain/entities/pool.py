from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Token:
    symbol: str
    name: str


@dataclass(frozen=True)
class Pool:
    address: str
    symbol: str
    create_time: int
    pool_type: str
    tokens: tuple[Token, ...] = field(default_factory=tuple)
