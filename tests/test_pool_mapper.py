from __future__ import annotations

import unittest

from pool_tags.domain.entities.pool import Token
from pool_tags.domain.services.pool_validation import validate_pool
from pool_tags.infrastructure.mappers.pool_mapper import map_row_to_pool


class PoolMapperTests(unittest.TestCase):
    def test_map_row_to_pool_reads_subgraph_fields(self):
        row = {
            "address": "0xpool",
            "symbol": "B-50WETH-50BAL",
            "createTime": "1650000000",
            "poolType": "Weighted",
            "tokens": [
                {"symbol": "WETH", "name": "Wrapped Ether"},
                {"symbol": "BAL", "name": "Balancer"},
            ],
        }

        pool = map_row_to_pool(row)

        self.assertEqual(pool.address, "0xpool")
        self.assertEqual(pool.symbol, "B-50WETH-50BAL")
        self.assertEqual(pool.create_time, 1650000000)
        self.assertEqual(pool.pool_type, "Weighted")
        self.assertEqual(
            pool.tokens,
            (Token(symbol="WETH", name="Wrapped Ether"), Token(symbol="BAL", name="Balancer")),
        )

    def test_map_row_to_pool_defaults_missing_fields(self):
        pool = map_row_to_pool({"address": "0xpool", "createTime": 5, "tokens": None})

        self.assertEqual(pool.symbol, "")
        self.assertEqual(pool.pool_type, "")
        self.assertEqual(pool.tokens, ())

    def test_map_row_to_pool_maps_null_token_fields_to_empty(self):
        pool = map_row_to_pool(
            {"address": "0xpool", "createTime": 5, "tokens": [{"symbol": None, "name": None}]}
        )

        self.assertEqual(pool.tokens, (Token(symbol="", name=""),))

    def test_map_row_to_pool_requires_create_time(self):
        with self.assertRaises(ValueError):
            map_row_to_pool({"address": "0xpool", "symbol": "S", "poolType": "Weighted", "tokens": []})
        with self.assertRaises(ValueError):
            map_row_to_pool({"address": "0xpool", "createTime": None, "tokens": []})

    def test_map_row_to_pool_keeps_null_token_entries_as_empty_tokens(self):
        pool = map_row_to_pool(
            {
                "address": "0xpool",
                "symbol": "B-WETH-BAL",
                "createTime": 5,
                "poolType": "Weighted",
                "tokens": [None, {"symbol": "BAL", "name": "Balancer"}],
            }
        )

        self.assertEqual(
            pool.tokens,
            (Token(symbol="", name=""), Token(symbol="BAL", name="Balancer")),
        )
        self.assertFalse(validate_pool(pool).accepted)
