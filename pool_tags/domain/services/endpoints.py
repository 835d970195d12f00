from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from urllib.parse import quote

from pool_tags.domain.exceptions import UnsupportedNetworkError


API_KEY_PLACEHOLDER = "[api-key]"


@lru_cache(maxsize=8)
def load_endpoint_registry(path: Path) -> Mapping[str, str]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Endpoint registry must be a JSON object: {path}")
    for network_id, template in raw.items():
        if API_KEY_PLACEHOLDER not in str(template):
            raise ValueError(
                f"Endpoint template for network {network_id} lacks {API_KEY_PLACEHOLDER}."
            )
    return MappingProxyType({str(network_id): str(template) for network_id, template in raw.items()})


def supported_networks(registry: Mapping[str, str]) -> list[str]:
    return list(registry.keys())


def ensure_supported_network(network_id: str, registry: Mapping[str, str]) -> str:
    key = str(network_id)
    if not key.isdecimal() or key not in registry:
        raise UnsupportedNetworkError(key, supported_networks(registry))
    return key


def resolve_endpoint(network_id: str, api_key: str, registry: Mapping[str, str]) -> str:
    """Return the subgraph URL for ``network_id`` with ``api_key`` substituted.

    Raises UnsupportedNetworkError when the id is not a decimal number or is
    not present in ``registry``.
    """
    key = ensure_supported_network(network_id, registry)
    return registry[key].replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""))
