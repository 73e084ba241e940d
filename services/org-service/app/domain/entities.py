"""
Domain entities for the sales organization.

Core business objects representing hierarchy levels, designations and agents,
plus the read-only projections returned by hierarchy resolution.
These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class RecordStatus(str, Enum):
    """Status of hierarchy levels and designations."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class AgentStatus(str, Enum):
    """Employment status of an agent."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


@dataclass(frozen=True)
class ChannelId:
    """Channel reference holding only the raw identifier."""

    value: str


@dataclass(frozen=True)
class PopulatedChannel:
    """Channel reference with the channel record loaded."""

    id: str
    name: Optional[str] = None
    code: Optional[str] = None


ChannelReference = Union[ChannelId, PopulatedChannel]


def resolve_channel_id(reference: Optional[ChannelReference]) -> Optional[str]:
    """
    Extract the channel identifier from a channel reference.

    Args:
        reference: Raw id, populated channel, or None

    Returns:
        The channel id, or None when the reference is missing or blank
    """
    if isinstance(reference, PopulatedChannel):
        channel_id = reference.id
    elif isinstance(reference, ChannelId):
        channel_id = reference.value
    else:
        return None
    return channel_id or None


@dataclass(frozen=True)
class HierarchyLevel:
    """
    One rung of a channel's organization chart.

    A lower rank is more senior. The level code is a short string token
    (e.g. "18") expected to be unique per channel.
    """

    id: str
    channel_id: str
    name: str
    level_code: str
    rank: int
    order: int = 0
    status: RecordStatus = RecordStatus.ACTIVE
    is_deleted: bool = False
    parent_id: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "hierarchyId": self.id,
            "channelId": self.channel_id,
            "hierarchyName": self.name,
            "hierarchyLevelCode": self.level_code,
            "hierarchyLevel": self.rank,
            "hierarchyOrder": self.order,
            "hierarchyStatus": self.status.value,
            "hierarchyParentId": self.parent_id,
            "hierarchyDescription": self.description,
        }


@dataclass(frozen=True)
class Designation:
    """Job title anchored to exactly one hierarchy level."""

    id: str
    channel_id: str
    hierarchy_id: str
    role_id: str
    name: str
    code: str
    status: RecordStatus = RecordStatus.ACTIVE
    is_deleted: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "designationId": self.id,
            "channelId": self.channel_id,
            "hierarchyId": self.hierarchy_id,
            "roleId": self.role_id,
            "designationName": self.name,
            "designationCode": self.code,
            "designationStatus": self.status.value,
        }


@dataclass(frozen=True)
class Agent:
    """Person occupying one designation within one channel."""

    id: str
    agent_code: str
    designation_id: str
    channel: Optional[ChannelReference] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: Optional[str] = None
    status: AgentStatus = AgentStatus.ACTIVE
    is_deleted: bool = False
    team_lead_id: Optional[str] = None
    reporting_manager_id: Optional[str] = None

    @property
    def channel_id(self) -> Optional[str]:
        """Channel identifier, whichever form the reference takes."""
        return resolve_channel_id(self.channel)

    @property
    def full_name(self) -> Optional[str]:
        """First, middle and last name joined, or the display name."""
        if self.first_name and self.last_name:
            parts = [self.first_name, self.middle_name, self.last_name]
            return " ".join(part for part in parts if part)
        return self.display_name

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "agentCode": self.agent_code,
            "designationId": self.designation_id,
            "channelId": self.channel_id,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "agentStatus": self.status.value,
            "teamLeadId": self.team_lead_id,
            "reportingManagerId": self.reporting_manager_id,
        }


@dataclass(frozen=True)
class SeniorLevel:
    """Hierarchy level more senior than the channel's anchor level."""

    hierarchy_id: str
    hierarchy_name: str

    def to_dict(self) -> dict:
        return {"hierarchyName": self.hierarchy_name, "hierarchyId": self.hierarchy_id}


@dataclass(frozen=True)
class LevelAgent:
    """Active agent found under a hierarchy level."""

    id: str
    first_name: str
    last_name: str
    agent_code: str
    designation_name: str

    def to_dict(self) -> dict:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "id": self.id,
            "agentCode": self.agent_code,
            "designationName": self.designation_name,
        }


@dataclass(frozen=True)
class LevelWithAgents:
    """Senior hierarchy level together with its active agents."""

    hierarchy_id: str
    hierarchy_name: str
    agents: List[LevelAgent] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hierarchyName": self.hierarchy_name,
            "hierarchyId": self.hierarchy_id,
            "agents": [agent.to_dict() for agent in self.agents],
        }


@dataclass(frozen=True)
class HierarchyInfo:
    """
    Result of the combined hierarchy info lookup.

    Exactly one of ``hierarchies`` and ``agents`` is set.
    """

    hierarchies: Optional[List[SeniorLevel]] = None
    agents: Optional[List[LevelAgent]] = None

    def to_dict(self) -> dict:
        if self.hierarchies is not None:
            return {"hierarchies": [level.to_dict() for level in self.hierarchies]}
        return {"agents": [agent.to_dict() for agent in self.agents or []]}
