from __future__ import annotations

from pool_tags.domain.entities.pool import Pool, Token
from pool_tags.domain.services.tag_builder import (
    PROJECT_NAME,
    PROJECT_URL,
    build_tag,
    truncate_symbol,
)


def _pool(symbol: str = "USDC-DAI", tokens: tuple[Token, ...] | None = None) -> Pool:
    return Pool(
        address="0xABC0000000000000000000000000000000000001",
        symbol=symbol,
        create_time=1700000000,
        pool_type="Stable",
        tokens=tokens
        if tokens is not None
        else (Token(symbol="USDC", name="USD Coin"), Token(symbol="DAI", name="Dai Stablecoin")),
    )


def test_build_tag_formats_every_field():
    tag = build_tag("1", _pool())

    assert tag.contract_address == "eip155:1:0xABC0000000000000000000000000000000000001"
    assert tag.public_name_tag == "USDC-DAI Pool"
    assert tag.project_name == PROJECT_NAME
    assert tag.ui_website_link == PROJECT_URL
    assert "USDC / DAI" in tag.public_note


def test_build_tag_keeps_token_order_in_note():
    tokens = (
        Token(symbol="WETH", name="Wrapped Ether"),
        Token(symbol="BAL", name="Balancer"),
        Token(symbol="USDC", name="USD Coin"),
    )

    tag = build_tag("42161", _pool(symbol="B-80BAL-20WETH", tokens=tokens))

    assert tag.contract_address.startswith("eip155:42161:")
    assert "WETH / BAL / USDC" in tag.public_note


def test_build_tag_truncates_long_symbol():
    symbol = "A" * 50

    tag = build_tag("1", _pool(symbol=symbol))

    name = tag.public_name_tag[: -len(" Pool")]
    assert tag.public_name_tag.endswith(" Pool")
    assert len(name) == 45
    assert name == "A" * 42 + "..."


def test_truncate_symbol_keeps_symbol_at_limit():
    assert truncate_symbol("B" * 45) == "B" * 45
    assert truncate_symbol("B" * 46) == "B" * 42 + "..."


def test_as_record_uses_output_column_names():
    record = build_tag("10", _pool()).as_record()

    assert list(record) == [
        "Contract Address",
        "Public Name Tag",
        "Project Name",
        "UI/Website Link",
        "Public Note",
    ]
    assert record["Contract Address"] == "eip155:10:0xABC0000000000000000000000000000000000001"
