from __future__ import annotations

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.entities.tag import Tag


CHAIN_NAMESPACE = "eip155"
PROJECT_NAME = "Balancer v2"
PROJECT_URL = "https://balancer.fi"
MAX_SYMBOL_LENGTH = 45
ELLIPSIS = "..."
NOTE_TEMPLATE = (
    "A Balancer v2 liquidity pool built on the protocol's vault-based multi-token AMM, "
    "holding the following tokens: {symbols}."
)


def chain_qualified_address(network_id: str, address: str) -> str:
    return f"{CHAIN_NAMESPACE}:{network_id}:{address}"


def truncate_symbol(symbol: str, max_length: int = MAX_SYMBOL_LENGTH) -> str:
    if len(symbol) <= max_length:
        return symbol
    return symbol[: max_length - len(ELLIPSIS)] + ELLIPSIS


def build_tag(network_id: str, pool: Pool) -> Tag:
    symbols = " / ".join(token.symbol for token in pool.tokens)
    return Tag(
        contract_address=chain_qualified_address(network_id, pool.address),
        public_name_tag=f"{truncate_symbol(pool.symbol)} Pool",
        project_name=PROJECT_NAME,
        ui_website_link=PROJECT_URL,
        public_note=NOTE_TEMPLATE.format(symbols=symbols),
    )
