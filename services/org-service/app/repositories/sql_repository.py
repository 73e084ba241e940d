"""
SQLAlchemy implementations of the organization repositories.

Maps ORM rows to domain entities. Database errors are logged and re-raised
unchanged.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..domain.entities import (
    Agent,
    AgentStatus,
    ChannelId,
    ChannelReference,
    Designation,
    HierarchyLevel,
    PopulatedChannel,
    RecordStatus,
)
from ..models import Agent as AgentModel
from ..models import Designation as DesignationModel
from ..models import Hierarchy as HierarchyModel
from .org_repository import IAgentRepository, IDesignationRepository, IHierarchyRepository

logger = logging.getLogger(__name__)


class SqlAgentRepository(IAgentRepository):
    """SQLAlchemy implementation for agent lookups."""

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    async def find_by_id(self, agent_id: str) -> Optional[Agent]:
        """Find agent by id, with its channel populated when the row exists."""
        try:
            logger.debug(f"Finding agent by id: {agent_id}")
            entry = self.db.query(AgentModel).filter(AgentModel.id == agent_id).first()
            return self._map_to_entity(entry) if entry else None
        except Exception as e:
            logger.error(f"Error finding agent {agent_id}: {e}")
            raise

    async def find_by_designation_and_channel(
        self, designation_id: str, channel_id: str
    ) -> List[Agent]:
        """Find non-deleted agents holding a designation within a channel."""
        try:
            entries = (
                self.db.query(AgentModel)
                .filter(
                    AgentModel.designation_id == designation_id,
                    AgentModel.channel_id == channel_id,
                    AgentModel.is_deleted.is_(False),
                )
                .order_by(AgentModel.created_at, AgentModel.id)
                .all()
            )
            logger.debug(
                f"Found {len(entries)} agents for designation {designation_id} "
                f"in channel {channel_id}"
            )
            return [self._map_to_entity(entry) for entry in entries]
        except Exception as e:
            logger.error(
                f"Error finding agents for designation {designation_id} "
                f"in channel {channel_id}: {e}"
            )
            raise

    @staticmethod
    def _channel_reference(entry: AgentModel) -> Optional[ChannelReference]:
        if entry.channel is not None:
            return PopulatedChannel(
                id=entry.channel.id,
                name=entry.channel.channel_name,
                code=entry.channel.channel_code,
            )
        if entry.channel_id:
            return ChannelId(entry.channel_id)
        return None

    def _map_to_entity(self, entry: AgentModel) -> Agent:
        """Map database row to domain entity."""
        return Agent(
            id=entry.id,
            agent_code=entry.agent_code,
            designation_id=entry.designation_id,
            channel=self._channel_reference(entry),
            first_name=entry.first_name,
            middle_name=entry.middle_name,
            last_name=entry.last_name,
            display_name=entry.display_name,
            status=AgentStatus(entry.agent_status),
            is_deleted=bool(entry.is_deleted),
            team_lead_id=entry.team_lead_id,
            reporting_manager_id=entry.reporting_manager_id,
        )


class SqlHierarchyRepository(IHierarchyRepository):
    """SQLAlchemy implementation for hierarchy level lookups."""

    def __init__(self, db: Session):
        self.db = db

    async def find_by_channel(self, channel_id: str) -> List[HierarchyLevel]:
        """Find non-deleted levels of a channel ordered by rank and order."""
        try:
            entries = (
                self.db.query(HierarchyModel)
                .filter(
                    HierarchyModel.channel_id == channel_id,
                    HierarchyModel.is_deleted.is_(False),
                )
                .order_by(HierarchyModel.hierarchy_level, HierarchyModel.hierarchy_order)
                .all()
            )
            logger.debug(f"Found {len(entries)} hierarchy levels for channel {channel_id}")
            return [self._map_to_entity(entry) for entry in entries]
        except Exception as e:
            logger.error(f"Error finding hierarchy levels for channel {channel_id}: {e}")
            raise

    def _map_to_entity(self, entry: HierarchyModel) -> HierarchyLevel:
        """Map database row to domain entity."""
        return HierarchyLevel(
            id=entry.id,
            channel_id=entry.channel_id,
            name=entry.hierarchy_name,
            level_code=entry.hierarchy_level_code,
            rank=entry.hierarchy_level,
            order=entry.hierarchy_order or 0,
            status=RecordStatus(entry.hierarchy_status),
            is_deleted=bool(entry.is_deleted),
            parent_id=entry.hierarchy_parent_id,
            description=entry.hierarchy_description,
        )


class SqlDesignationRepository(IDesignationRepository):
    """SQLAlchemy implementation for designation lookups."""

    def __init__(self, db: Session):
        self.db = db

    async def find_by_hierarchy_id(self, hierarchy_id: str) -> List[Designation]:
        """Find non-deleted designations of a level, newest first."""
        try:
            entries = (
                self.db.query(DesignationModel)
                .filter(
                    DesignationModel.hierarchy_id == hierarchy_id,
                    DesignationModel.is_deleted.is_(False),
                )
                .order_by(DesignationModel.created_at.desc(), DesignationModel.id)
                .all()
            )
            logger.debug(f"Found {len(entries)} designations for hierarchy {hierarchy_id}")
            return [self._map_to_entity(entry) for entry in entries]
        except Exception as e:
            logger.error(f"Error finding designations for hierarchy {hierarchy_id}: {e}")
            raise

    def _map_to_entity(self, entry: DesignationModel) -> Designation:
        """Map database row to domain entity."""
        return Designation(
            id=entry.id,
            channel_id=entry.channel_id,
            hierarchy_id=entry.hierarchy_id,
            role_id=entry.role_id,
            name=entry.designation_name,
            code=entry.designation_code,
            status=RecordStatus(entry.designation_status),
            is_deleted=bool(entry.is_deleted),
        )
