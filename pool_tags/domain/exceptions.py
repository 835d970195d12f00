from __future__ import annotations


class TagsError(Exception):
    """Base for pool tag errors."""


class UnsupportedNetworkError(TagsError):
    """Network id is not a number or has no configured endpoint."""

    def __init__(self, network_id: str, supported: list[str]):
        self.network_id = network_id
        self.supported = list(supported)
        super().__init__(
            f"Unsupported network: {network_id}. "
            f"Supported networks: {', '.join(self.supported)}"
        )


class SubgraphError(TagsError):
    """Subgraph scan aborted."""


class SubgraphTransportError(SubgraphError):
    """HTTP status was not a success or the request never completed."""


class SubgraphQueryError(SubgraphError):
    """Subgraph answered with GraphQL errors."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("GraphQL errors: " + " | ".join(self.messages))


class SubgraphResponseError(SubgraphError):
    """Payload does not carry data.pools."""


class TagFetchError(TagsError):
    """Tags could not be produced for the requested network."""
