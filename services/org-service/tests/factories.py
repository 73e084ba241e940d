"""
Shared test data builders.
"""

from datetime import datetime

from app.domain.entities import (
    Agent,
    AgentStatus,
    ChannelId,
    Designation,
    HierarchyLevel,
)
from app import models

# Fixed object ids used across tests
CHANNEL_ID = "a" * 24
OTHER_CHANNEL_ID = "b" * 24
DIRECTOR_LEVEL_ID = "0" * 23 + "5"
MANAGER_LEVEL_ID = "0" * 22 + "10"
ASSOCIATE_LEVEL_ID = "0" * 22 + "18"
AGENT_ID = "c" * 24
ROLE_ID = "e" * 24
REGIONAL_DIRECTOR_ID = "1" * 24
ZONAL_DIRECTOR_ID = "2" * 24


def make_level(level_id: str, name: str, level_code: str, rank: int, channel_id=CHANNEL_ID):
    return HierarchyLevel(
        id=level_id, channel_id=channel_id, name=name, level_code=level_code, rank=rank
    )


def make_designation(designation_id: str, name: str, hierarchy_id: str) -> Designation:
    """Build a designation in the default test channel."""
    return Designation(
        id=designation_id,
        channel_id=CHANNEL_ID,
        hierarchy_id=hierarchy_id,
        role_id=ROLE_ID,
        name=name,
        code=name.upper().replace(" ", "_")[:20],
    )


def make_agent(
    agent_id: str,
    first_name="Test",
    last_name="Agent",
    status=AgentStatus.ACTIVE,
    is_deleted=False,
    designation_id="d" * 24,
) -> Agent:
    """Build an agent with a raw channel id reference."""
    return Agent(
        id=agent_id,
        agent_code=f"AG{agent_id[-4:]}",
        designation_id=designation_id,
        channel=ChannelId(CHANNEL_ID),
        first_name=first_name,
        last_name=last_name,
        status=status,
        is_deleted=is_deleted,
    )


def seed_organization(db):
    """
    Seed two channels with levels, designations and agents.

    Channel A: Director (rank 1), Manager (rank 2, no designations),
    Associate (rank 3, code 18) and a soft-deleted level. Director has
    Regional Director (one active, one suspended, one deleted agent, plus one
    agent in channel B) and Zonal Director (one agent without a channel).
    Channel B has no levels. AGENT_ID is an Associate in channel A.
    """
    db.add_all(
        [
            models.Channel(id=CHANNEL_ID, channel_name="Bancassurance", channel_code="BANCA"),
            models.Channel(id=OTHER_CHANNEL_ID, channel_name="Agency", channel_code="AGENCY"),
        ]
    )
    db.add_all(
        [
            models.Hierarchy(
                id=ASSOCIATE_LEVEL_ID,
                channel_id=CHANNEL_ID,
                hierarchy_name="Associate",
                hierarchy_level_code="18",
                hierarchy_level=3,
            ),
            models.Hierarchy(
                id=DIRECTOR_LEVEL_ID,
                channel_id=CHANNEL_ID,
                hierarchy_name="Director",
                hierarchy_level_code="5",
                hierarchy_level=1,
            ),
            models.Hierarchy(
                id=MANAGER_LEVEL_ID,
                channel_id=CHANNEL_ID,
                hierarchy_name="Manager",
                hierarchy_level_code="10",
                hierarchy_level=2,
                hierarchy_parent_id=DIRECTOR_LEVEL_ID,
            ),
            models.Hierarchy(
                id="9" * 24,
                channel_id=CHANNEL_ID,
                hierarchy_name="Retired Level",
                hierarchy_level_code="7",
                hierarchy_level=1,
                is_deleted=True,
            ),
        ]
    )
    db.add_all(
        [
            models.Designation(
                id=REGIONAL_DIRECTOR_ID,
                channel_id=CHANNEL_ID,
                hierarchy_id=DIRECTOR_LEVEL_ID,
                role_id=ROLE_ID,
                designation_name="Regional Director",
                designation_code="RD",
                created_at=datetime(2024, 1, 1),
            ),
            models.Designation(
                id=ZONAL_DIRECTOR_ID,
                channel_id=CHANNEL_ID,
                hierarchy_id=DIRECTOR_LEVEL_ID,
                role_id=ROLE_ID,
                designation_name="Zonal Director",
                designation_code="ZD",
                created_at=datetime(2024, 6, 1),
            ),
            models.Designation(
                id="3" * 24,
                channel_id=CHANNEL_ID,
                hierarchy_id=DIRECTOR_LEVEL_ID,
                role_id=ROLE_ID,
                designation_name="Old Director",
                designation_code="OD",
                is_deleted=True,
            ),
            models.Designation(
                id="d" * 24,
                channel_id=CHANNEL_ID,
                hierarchy_id=ASSOCIATE_LEVEL_ID,
                role_id=ROLE_ID,
                designation_name="Sales Associate",
                designation_code="SA",
            ),
        ]
    )
    db.add_all(
        [
            models.Agent(
                id=AGENT_ID,
                channel_id=CHANNEL_ID,
                designation_id="d" * 24,
                agent_code="AG0001",
                first_name="Asha",
                last_name="Verma",
                created_at=datetime(2023, 1, 1),
            ),
            models.Agent(
                id="4" * 24,
                channel_id=CHANNEL_ID,
                designation_id=REGIONAL_DIRECTOR_ID,
                agent_code="AG0004",
                first_name="Ravi",
                last_name="Kumar",
                agent_status="active",
                created_at=datetime(2024, 1, 1),
            ),
            models.Agent(
                id="5" * 24,
                channel_id=CHANNEL_ID,
                designation_id=REGIONAL_DIRECTOR_ID,
                agent_code="AG0005",
                first_name="Meera",
                last_name="Iyer",
                agent_status="suspended",
                created_at=datetime(2024, 2, 1),
            ),
            models.Agent(
                id="6" * 24,
                channel_id=CHANNEL_ID,
                designation_id=REGIONAL_DIRECTOR_ID,
                agent_code="AG0006",
                first_name="Gone",
                last_name="Agent",
                is_deleted=True,
            ),
            models.Agent(
                id="7" * 24,
                channel_id=OTHER_CHANNEL_ID,
                designation_id=REGIONAL_DIRECTOR_ID,
                agent_code="AG0007",
                first_name="Other",
                last_name="Channel",
            ),
            models.Agent(
                id="8" * 24,
                channel_id=None,
                designation_id=ZONAL_DIRECTOR_ID,
                agent_code="AG0008",
                first_name="No",
                last_name="Channel",
                team_lead_id="4" * 24,
            ),
        ]
    )
    db.commit()
    return db
