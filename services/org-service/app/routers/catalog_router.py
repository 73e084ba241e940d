"""
Hierarchy and designation catalog router.

Read-only listings used by the org-chart front end.
"""

import structlog
from fastapi import APIRouter, Depends

from ..dependencies import get_designation_catalog, get_hierarchy_catalog
from ..services.directory_service import DesignationCatalog, HierarchyCatalog
from ..validators import validate_object_id
from .agent_router import HierarchyResponse
from .errors import ERROR_RESPONSES, to_http_exception

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get(
    "/hierarchies/channel/{channel_id}",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="List hierarchy levels of a channel",
)
async def get_hierarchies_by_channel(
    channel_id: str,
    catalog: HierarchyCatalog = Depends(get_hierarchy_catalog),
):
    try:
        validate_object_id(channel_id, "channelId")
        levels = await catalog.levels_for_channel(channel_id)
    except Exception as e:
        raise to_http_exception(e)

    return HierarchyResponse(
        data=[level.to_dict() for level in levels],
        message="Hierarchies retrieved successfully",
    )


@router.get(
    "/designations/hierarchy/{hierarchy_id}",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="List designations of a hierarchy level",
)
async def get_designations_by_hierarchy(
    hierarchy_id: str,
    catalog: DesignationCatalog = Depends(get_designation_catalog),
):
    try:
        validate_object_id(hierarchy_id, "hierarchyId")
        designations = await catalog.designations_for_level(hierarchy_id)
    except Exception as e:
        raise to_http_exception(e)

    return HierarchyResponse(
        data=[designation.to_dict() for designation in designations],
        message="Designations retrieved by hierarchy ID successfully",
    )
