"""
Agent hierarchy API router.

Exposes the hierarchy resolution operations for an agent:
- Senior hierarchy levels of the agent's channel
- Active agents under a hierarchy level
- Full org-chart tree with agents
- Combined hierarchy info lookup
"""

import time
from typing import Any, Optional

import structlog
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..dependencies import get_agent_directory, get_hierarchy_service
from ..metrics import track_resolution
from ..services.directory_service import AgentDirectory
from ..services.hierarchy_service import HierarchyResolutionService
from ..validators import (
    normalize_designation_name,
    validate_object_id,
    validate_optional_object_id,
)
from .errors import ERROR_RESPONSES, error_code, to_http_exception

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/agents", tags=["agents"])


class HierarchyResponse(BaseModel):
    """Hierarchy resolution response model."""

    success: bool = True
    data: Any
    message: str


@router.get(
    "/hierarchy-info",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="Get agent hierarchy info",
    description="""
    Returns the hierarchy levels senior to the agent's anchor level.

    When both `hierarchyId` and `channelId` are supplied, returns the active
    agents holding designations of that level in that channel instead.
    """,
)
async def get_agent_hierarchy_info(
    agent_id: Optional[str] = Query(None, alias="agentId"),
    hierarchy_id: Optional[str] = Query(None, alias="hierarchyId"),
    channel_id: Optional[str] = Query(None, alias="channelId"),
    designation_name: Optional[str] = Query(None, alias="designationName"),
    service: HierarchyResolutionService = Depends(get_hierarchy_service),
):
    """Combined senior-levels / agents-under-level lookup."""
    start_time = time.time()
    try:
        agent_id = validate_object_id(agent_id, "agentId")
        hierarchy_id = validate_optional_object_id(hierarchy_id, "hierarchyId")
        channel_id = validate_optional_object_id(channel_id, "channelId")
        designation_name = normalize_designation_name(designation_name)

        info = await service.resolve_hierarchy_info(
            agent_id, hierarchy_id, channel_id, designation_name
        )
    except Exception as e:
        track_resolution("hierarchy_info", error_code(e), time.time() - start_time)
        raise to_http_exception(e)

    count = len(info.hierarchies if info.hierarchies is not None else info.agents or [])
    track_resolution("hierarchy_info", "success", time.time() - start_time, count)

    message = (
        "Successfully retrieved agent hierarchies"
        if info.hierarchies is not None
        else "Successfully retrieved agents list"
    )
    return HierarchyResponse(data=info.to_dict(), message=message)


@router.get(
    "/{agent_id}/senior-hierarchies",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="List hierarchy levels senior to the agent's anchor level",
)
async def get_senior_hierarchies(
    agent_id: str,
    service: HierarchyResolutionService = Depends(get_hierarchy_service),
):
    start_time = time.time()
    try:
        validate_object_id(agent_id, "agentId")
        levels = await service.resolve_senior_levels(agent_id)
    except Exception as e:
        track_resolution("senior_levels", error_code(e), time.time() - start_time)
        raise to_http_exception(e)

    track_resolution("senior_levels", "success", time.time() - start_time, len(levels))
    logger.info("Senior hierarchies resolved", agent_id=agent_id, count=len(levels))

    return HierarchyResponse(
        data=[level.to_dict() for level in levels],
        message="Successfully retrieved agent hierarchies",
    )


@router.get(
    "/{agent_id}/hierarchy-agents",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="List active agents under a hierarchy level",
)
async def get_agents_under_hierarchy(
    agent_id: str,
    hierarchy_id: Optional[str] = Query(None, alias="hierarchyId"),
    channel_id: Optional[str] = Query(None, alias="channelId"),
    designation_name: Optional[str] = Query(None, alias="designationName"),
    service: HierarchyResolutionService = Depends(get_hierarchy_service),
):
    """
    Active agents holding designations of a hierarchy level in a channel.

    An empty list means the level currently has no active staff.
    """
    start_time = time.time()
    try:
        validate_object_id(agent_id, "agentId")
        hierarchy_id = validate_object_id(hierarchy_id, "hierarchyId")
        channel_id = validate_object_id(channel_id, "channelId")
        designation_name = normalize_designation_name(designation_name)

        agents = await service.resolve_agents_under_level(
            agent_id, hierarchy_id, channel_id, designation_name
        )
    except Exception as e:
        track_resolution("agents_under_level", error_code(e), time.time() - start_time)
        raise to_http_exception(e)

    track_resolution("agents_under_level", "success", time.time() - start_time, len(agents))

    return HierarchyResponse(
        data=[agent.to_dict() for agent in agents],
        message="Successfully retrieved agents list",
    )


@router.get(
    "/{agent_id}/hierarchy-tree",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="Get senior hierarchy levels with their active agents",
)
async def get_hierarchy_tree(
    agent_id: str,
    channel_id: Optional[str] = Query(None, alias="channelId"),
    service: HierarchyResolutionService = Depends(get_hierarchy_service),
):
    """Org-chart data: senior levels that have at least one active agent."""
    start_time = time.time()
    try:
        validate_object_id(agent_id, "agentId")
        channel_id = validate_object_id(channel_id, "channelId")
        tree = await service.resolve_full_tree_with_agents(agent_id, channel_id)
    except Exception as e:
        track_resolution("full_tree", error_code(e), time.time() - start_time)
        raise to_http_exception(e)

    track_resolution("full_tree", "success", time.time() - start_time, len(tree))

    return HierarchyResponse(
        data={"hierarchies": [level.to_dict() for level in tree]},
        message="Successfully retrieved agent hierarchy with agents",
    )


@router.get(
    "/{agent_id}",
    response_model=HierarchyResponse,
    responses=ERROR_RESPONSES,
    summary="Get agent by id",
)
async def get_agent(
    agent_id: str,
    directory: AgentDirectory = Depends(get_agent_directory),
):
    try:
        validate_object_id(agent_id, "agentId")
        agent = await directory.get_agent(agent_id)
    except Exception as e:
        raise to_http_exception(e)

    return HierarchyResponse(data=agent.to_dict(), message="Agent retrieved successfully")
