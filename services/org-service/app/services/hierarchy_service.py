"""
Hierarchy resolution service.

Resolves the organization levels senior to an agent's channel anchor level,
and the active agents working under those levels.
"""

import asyncio
import logging
from typing import List, Optional

from ..domain.entities import (
    Designation,
    HierarchyInfo,
    HierarchyLevel,
    LevelAgent,
    LevelWithAgents,
    SeniorLevel,
)
from ..domain.exceptions import ChannelNotResolvedException, OrgServiceException
from ..domain.hierarchy_rules import (
    DEFAULT_ANCHOR_LEVEL_CODE,
    filter_senior_levels,
    find_anchor_level,
    project_level_agents,
    select_designations,
    to_senior_levels,
)
from .directory_service import AgentDirectory, DesignationCatalog, HierarchyCatalog

logger = logging.getLogger(__name__)


class HierarchyResolutionService:
    """
    Hierarchy resolution orchestrator.

    Every operation follows the same prefix:
    1. Resolve the agent and its channel
    2. Load the channel's hierarchy levels
    3. Locate the anchor level by its level code
    4. Keep the levels with a lower rank than the anchor

    Levels are compared by rank only; the result is a flat threshold filter,
    not a walk over parent links.
    """

    def __init__(
        self,
        agents: AgentDirectory,
        hierarchies: HierarchyCatalog,
        designations: DesignationCatalog,
        anchor_level_code: str = DEFAULT_ANCHOR_LEVEL_CODE,
    ):
        """
        Initialize resolution service.

        Args:
            agents: Agent directory lookup
            hierarchies: Hierarchy level catalog
            designations: Designation catalog
            anchor_level_code: Level code of the channel's entry level
        """
        self.agents = agents
        self.hierarchies = hierarchies
        self.designations = designations
        self.anchor_level_code = anchor_level_code

    async def resolve_senior_levels(self, agent_id: str) -> List[SeniorLevel]:
        """
        List the levels more senior than the anchor level of the agent's channel.

        Args:
            agent_id: Agent identifier

        Returns:
            Senior levels in catalog order

        Raises:
            AgentNotFoundException: If the agent does not exist
            ChannelNotResolvedException: If the agent has no channel
            AnchorLevelNotFoundException: If the channel has no anchor level
        """
        logger.debug(f"Resolving senior levels for agent {agent_id}")
        try:
            levels = await self._senior_levels_for_agent(agent_id)
        except OrgServiceException:
            raise
        except Exception as e:
            logger.error(f"Failed to resolve senior levels for agent {agent_id}: {e}")
            raise

        logger.debug(f"Returning {len(levels)} senior levels for agent {agent_id}")
        return to_senior_levels(levels)

    async def resolve_agents_under_level(
        self,
        agent_id: str,
        hierarchy_id: str,
        channel_id: str,
        designation_name: Optional[str] = None,
    ) -> List[LevelAgent]:
        """
        List the active agents holding designations of a hierarchy level.

        The agent is only used to check that its channel has an anchor level.
        Designations are expanded one after another.

        Args:
            agent_id: Agent whose channel must define the anchor level
            hierarchy_id: Hierarchy level to expand
            channel_id: Channel the agents must belong to
            designation_name: Optional designation name to narrow the level to

        Returns:
            Active agents, possibly empty

        Raises:
            AgentNotFoundException: If the agent does not exist
            AnchorLevelNotFoundException: If the channel has no anchor level
            DesignationNotFoundException: If designation_name matches nothing
        """
        logger.debug(
            f"Resolving agents under hierarchy {hierarchy_id} in channel {channel_id} "
            f"for agent {agent_id}"
        )
        try:
            await self._senior_levels_for_agent(agent_id)

            designations = select_designations(
                await self.designations.designations_for_level(hierarchy_id),
                designation_name,
                hierarchy_id,
            )

            agents: List[LevelAgent] = []
            for designation in designations:
                agents.extend(await self._agents_for_designation(designation, channel_id))
        except OrgServiceException:
            raise
        except Exception as e:
            logger.error(f"Failed to resolve agents under hierarchy {hierarchy_id}: {e}")
            raise

        logger.debug(f"Returning {len(agents)} agents under hierarchy {hierarchy_id}")
        return agents

    async def resolve_full_tree_with_agents(
        self, agent_id: str, channel_id: str
    ) -> List[LevelWithAgents]:
        """
        Build the senior part of the org chart with its active agents.

        Levels and their designations are expanded concurrently. A failure in
        any branch fails the whole call. Levels without agents are omitted.

        Args:
            agent_id: Agent whose channel defines the levels
            channel_id: Channel the agents must belong to

        Returns:
            Senior levels that have at least one active agent, in catalog order
        """
        logger.debug(f"Resolving hierarchy tree for agent {agent_id} in channel {channel_id}")
        try:
            levels = await self._senior_levels_for_agent(agent_id)
            expanded = await asyncio.gather(
                *(self._expand_level(level, channel_id) for level in levels)
            )
        except OrgServiceException:
            raise
        except Exception as e:
            logger.error(f"Failed to resolve hierarchy tree for agent {agent_id}: {e}")
            raise

        tree = [level for level in expanded if level.agents]
        logger.debug(
            f"Resolved {len(tree)} levels with "
            f"{sum(len(level.agents) for level in tree)} agents for agent {agent_id}"
        )
        return tree

    async def resolve_hierarchy_info(
        self,
        agent_id: str,
        hierarchy_id: Optional[str] = None,
        channel_id: Optional[str] = None,
        designation_name: Optional[str] = None,
    ) -> HierarchyInfo:
        """
        Resolve senior levels or agents depending on the supplied filters.

        Without both a hierarchy id and a channel id the senior levels are
        returned; otherwise the agents under the given level.
        """
        if not hierarchy_id or not channel_id:
            return HierarchyInfo(hierarchies=await self.resolve_senior_levels(agent_id))

        agents = await self.resolve_agents_under_level(
            agent_id, hierarchy_id, channel_id, designation_name
        )
        return HierarchyInfo(agents=agents)

    async def _senior_levels_for_agent(self, agent_id: str) -> List[HierarchyLevel]:
        agent = await self.agents.get_agent(agent_id)

        agent_channel_id = agent.channel_id
        if agent_channel_id is None:
            raise ChannelNotResolvedException(agent_id)

        levels = await self.hierarchies.levels_for_channel(agent_channel_id)
        anchor = find_anchor_level(levels, self.anchor_level_code, agent_channel_id)
        return filter_senior_levels(levels, anchor)

    async def _expand_level(self, level: HierarchyLevel, channel_id: str) -> LevelWithAgents:
        designations = await self.designations.designations_for_level(level.id)
        per_designation = await asyncio.gather(
            *(self._agents_for_designation(d, channel_id) for d in designations)
        )
        return LevelWithAgents(
            hierarchy_id=level.id,
            hierarchy_name=level.name,
            agents=[agent for agents in per_designation for agent in agents],
        )

    async def _agents_for_designation(
        self, designation: Designation, channel_id: str
    ) -> List[LevelAgent]:
        agents = await self.designations.agents_for_designation(designation.id, channel_id)
        return project_level_agents(agents, designation)
