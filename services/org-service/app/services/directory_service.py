"""
Read-only lookups over the organization data.

Agent directory, hierarchy level catalog and designation catalog: the
leaf collaborators of the hierarchy resolution service.
"""

import logging
from typing import List

from ..domain.entities import Agent, Designation, HierarchyLevel
from ..domain.exceptions import AgentNotFoundException
from ..repositories.org_repository import (
    IAgentRepository,
    IDesignationRepository,
    IHierarchyRepository,
)

logger = logging.getLogger(__name__)


class AgentDirectory:
    """Resolves agent records."""

    def __init__(self, agent_repo: IAgentRepository):
        self.agent_repo = agent_repo

    async def get_agent(self, agent_id: str) -> Agent:
        """
        Resolve an agent by identifier.

        Raises:
            AgentNotFoundException: If the agent does not exist
        """
        agent = await self.agent_repo.find_by_id(agent_id)
        if agent is None:
            logger.info(f"Agent not found: {agent_id}")
            raise AgentNotFoundException(agent_id)
        return agent


class HierarchyCatalog:
    """Resolves the hierarchy levels defined for a channel."""

    def __init__(self, hierarchy_repo: IHierarchyRepository):
        self.hierarchy_repo = hierarchy_repo

    async def levels_for_channel(self, channel_id: str) -> List[HierarchyLevel]:
        levels = await self.hierarchy_repo.find_by_channel(channel_id)
        logger.debug(f"Hierarchies found by channel {channel_id}: {len(levels)}")
        return levels


class DesignationCatalog:
    """Resolves designations of a level and the agents holding a designation."""

    def __init__(self, designation_repo: IDesignationRepository, agent_repo: IAgentRepository):
        self.designation_repo = designation_repo
        self.agent_repo = agent_repo

    async def designations_for_level(self, hierarchy_id: str) -> List[Designation]:
        """Designations anchored to a level, from any channel."""
        designations = await self.designation_repo.find_by_hierarchy_id(hierarchy_id)
        logger.debug(f"Designations found by hierarchy {hierarchy_id}: {len(designations)}")
        return designations

    async def agents_for_designation(self, designation_id: str, channel_id: str) -> List[Agent]:
        """Agents holding a designation within a channel."""
        return await self.agent_repo.find_by_designation_and_channel(designation_id, channel_id)
