from __future__ import annotations

from collections.abc import Mapping
import logging

from fastapi import APIRouter, Depends, Header, HTTPException

from pool_tags.api.deps import (
    get_default_api_key,
    get_endpoint_registry,
    get_return_tags_use_case,
)
from pool_tags.api.schemas.tags import (
    NetworkTagsResponse,
    SupportedNetworksResponse,
    TagResponse,
)
from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.exceptions import TagFetchError, UnsupportedNetworkError
from pool_tags.domain.services.endpoints import ensure_supported_network, supported_networks

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/networks", response_model=SupportedNetworksResponse)
def list_networks(registry: Mapping[str, str] = Depends(get_endpoint_registry)):
    return SupportedNetworksResponse(networks=supported_networks(registry))


@router.get("/v1/networks/{network_id}/tags", response_model=NetworkTagsResponse)
def get_network_tags(
    network_id: str,
    x_graph_api_key: str | None = Header(default=None),
    default_api_key: str = Depends(get_default_api_key),
    registry: Mapping[str, str] = Depends(get_endpoint_registry),
    use_case: ReturnTagsUseCase = Depends(get_return_tags_use_case),
):
    try:
        ensure_supported_network(network_id, registry)
    except UnsupportedNetworkError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    api_key = (x_graph_api_key or default_api_key or "").strip()
    if not api_key:
        raise HTTPException(status_code=400, detail="GRAPH_API_KEY is required for subgraph access.")

    try:
        output = use_case.execute(ReturnTagsInput(network_id=network_id, api_key=api_key))
    except UnsupportedNetworkError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TagFetchError as exc:
        logger.warning("tags_router: fetch_failed network_id=%s error=%s", network_id, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return NetworkTagsResponse(
        network_id=output.network_id,
        fetched=output.fetched,
        rejected=output.rejected,
        tags=[
            TagResponse(
                contract_address=tag.contract_address,
                public_name_tag=tag.public_name_tag,
                project_name=tag.project_name,
                ui_website_link=tag.ui_website_link,
                public_note=tag.public_note,
            )
            for tag in output.tags
        ],
    )
