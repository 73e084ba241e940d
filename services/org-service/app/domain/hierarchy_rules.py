"""
Hierarchy resolution rules.

Pure functions behind the resolution service: anchor lookup, the senior
level filter, agent qualification and the result projections. Levels are
compared by numeric rank only; parent links are never followed.
"""

from typing import Iterable, List, Optional, Sequence

from .entities import (
    Agent,
    AgentStatus,
    Designation,
    HierarchyLevel,
    LevelAgent,
    SeniorLevel,
)
from .exceptions import AnchorLevelNotFoundException, DesignationNotFoundException

DEFAULT_ANCHOR_LEVEL_CODE = "18"


def find_anchor_level(
    levels: Sequence[HierarchyLevel],
    anchor_code: str = DEFAULT_ANCHOR_LEVEL_CODE,
    channel_id: Optional[str] = None,
) -> HierarchyLevel:
    """
    Find the channel's anchor (entry) level.

    The first level in catalog order carrying the anchor code wins.

    Raises:
        AnchorLevelNotFoundException: If no level carries the anchor code
    """
    for level in levels:
        if level.level_code == anchor_code:
            return level
    raise AnchorLevelNotFoundException(anchor_code, channel_id)


def filter_senior_levels(
    levels: Iterable[HierarchyLevel], anchor: HierarchyLevel
) -> List[HierarchyLevel]:
    """Keep levels strictly more senior than the anchor, preserving order."""
    return [level for level in levels if level.rank < anchor.rank]


def to_senior_levels(levels: Iterable[HierarchyLevel]) -> List[SeniorLevel]:
    return [SeniorLevel(hierarchy_id=level.id, hierarchy_name=level.name) for level in levels]


def is_qualifying_agent(agent: Agent) -> bool:
    """
    Check whether an agent may appear under a hierarchy level.

    The agent needs both names, must not be soft-deleted and must be active.
    """
    return bool(
        agent.first_name
        and agent.last_name
        and not agent.is_deleted
        and agent.status == AgentStatus.ACTIVE
    )


def project_level_agents(
    agents: Iterable[Agent], designation: Designation
) -> List[LevelAgent]:
    """
    Filter agents to qualifying ones and project them for a designation.

    The designation name comes from the designation being expanded,
    not from the agent record.
    """
    return [
        LevelAgent(
            id=agent.id,
            first_name=agent.first_name,
            last_name=agent.last_name,
            agent_code=agent.agent_code,
            designation_name=designation.name,
        )
        for agent in agents
        if is_qualifying_agent(agent)
    ]


def _normalize_name(name: str) -> str:
    return name.strip().casefold()


def select_designations(
    designations: Sequence[Designation],
    designation_name: Optional[str] = None,
    hierarchy_id: Optional[str] = None,
) -> List[Designation]:
    """
    Narrow a level's designations to the requested name.

    Without a name every designation is kept. Name matching ignores case and
    surrounding whitespace.

    Raises:
        DesignationNotFoundException: If a name is given and nothing matches
    """
    if designation_name is None or not designation_name.strip():
        return list(designations)

    wanted = _normalize_name(designation_name)
    selected = [d for d in designations if _normalize_name(d.name) == wanted]
    if not selected:
        raise DesignationNotFoundException(designation_name, hierarchy_id)
    return selected
