"""
Organization repository interfaces (Abstract Base Classes).

Defines the read contracts the hierarchy resolution engine consumes,
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entities import Agent, Designation, HierarchyLevel


class IAgentRepository(ABC):
    """Read access to agent records."""

    @abstractmethod
    async def find_by_id(self, agent_id: str) -> Optional[Agent]:
        """
        Find an agent by identifier.

        Args:
            agent_id: Agent identifier

        Returns:
            Agent entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_designation_and_channel(
        self, designation_id: str, channel_id: str
    ) -> List[Agent]:
        """
        Find agents holding a designation within a channel.

        Args:
            designation_id: Designation identifier
            channel_id: Channel identifier

        Returns:
            List of agents, excluding soft-deleted records
        """
        pass


class IHierarchyRepository(ABC):
    """Read access to hierarchy levels."""

    @abstractmethod
    async def find_by_channel(self, channel_id: str) -> List[HierarchyLevel]:
        """
        Find all non-deleted hierarchy levels of a channel.

        Args:
            channel_id: Channel identifier

        Returns:
            List of hierarchy levels (no ordering guarantee)
        """
        pass


class IDesignationRepository(ABC):
    """Read access to designations."""

    @abstractmethod
    async def find_by_hierarchy_id(self, hierarchy_id: str) -> List[Designation]:
        """
        Find all non-deleted designations anchored to a hierarchy level.

        Args:
            hierarchy_id: Hierarchy level identifier

        Returns:
            List of designations from any channel
        """
        pass
