"""
Tests for the SQLAlchemy repositories.

Covers:
- Row to entity mapping
- Soft-delete filtering
- Channel reference population
- Ordering of hierarchy levels and designations
"""

import pytest

from app.domain.entities import AgentStatus, ChannelId, PopulatedChannel
from app.models import Agent, Designation
from app.repositories.sql_repository import (
    SqlAgentRepository,
    SqlDesignationRepository,
    SqlHierarchyRepository,
)
from factories import (
    ASSOCIATE_LEVEL_ID,
    CHANNEL_ID,
    DIRECTOR_LEVEL_ID,
    MANAGER_LEVEL_ID,
    OTHER_CHANNEL_ID,
    REGIONAL_DIRECTOR_ID,
    ROLE_ID,
    ZONAL_DIRECTOR_ID,
    seed_organization,
)


@pytest.fixture
def seeded_db(db_session):
    return seed_organization(db_session)


class TestSqlAgentRepository:
    """Test agent repository."""

    @pytest.mark.asyncio
    async def test_find_by_id_populates_channel(self, seeded_db):
        repo = SqlAgentRepository(seeded_db)

        agent = await repo.find_by_id("4" * 24)

        assert agent is not None
        assert agent.channel == PopulatedChannel(
            id=CHANNEL_ID, name="Bancassurance", code="BANCA"
        )
        assert agent.channel_id == CHANNEL_ID
        assert agent.status == AgentStatus.ACTIVE
        assert agent.full_name == "Ravi Kumar"

    @pytest.mark.asyncio
    async def test_find_by_id_without_channel(self, seeded_db):
        repo = SqlAgentRepository(seeded_db)

        agent = await repo.find_by_id("8" * 24)

        assert agent.channel is None
        assert agent.channel_id is None
        assert agent.team_lead_id == "4" * 24

    @pytest.mark.asyncio
    async def test_find_by_id_unknown(self, seeded_db):
        repo = SqlAgentRepository(seeded_db)

        assert await repo.find_by_id("f" * 24) is None

    @pytest.mark.asyncio
    async def test_find_by_designation_and_channel(self, seeded_db):
        repo = SqlAgentRepository(seeded_db)

        agents = await repo.find_by_designation_and_channel(REGIONAL_DIRECTOR_ID, CHANNEL_ID)

        # Soft-deleted and other-channel agents are excluded, status is not filtered here
        assert [agent.id for agent in agents] == ["4" * 24, "5" * 24]
        assert agents[1].status == AgentStatus.SUSPENDED

    @pytest.mark.asyncio
    async def test_find_by_designation_other_channel(self, seeded_db):
        repo = SqlAgentRepository(seeded_db)

        agents = await repo.find_by_designation_and_channel(
            REGIONAL_DIRECTOR_ID, OTHER_CHANNEL_ID
        )

        assert [agent.id for agent in agents] == ["7" * 24]


class TestSqlHierarchyRepository:
    """Test hierarchy repository."""

    @pytest.mark.asyncio
    async def test_find_by_channel_orders_by_rank(self, seeded_db):
        repo = SqlHierarchyRepository(seeded_db)

        levels = await repo.find_by_channel(CHANNEL_ID)

        assert [level.id for level in levels] == [
            DIRECTOR_LEVEL_ID,
            MANAGER_LEVEL_ID,
            ASSOCIATE_LEVEL_ID,
        ]
        assert levels[1].parent_id == DIRECTOR_LEVEL_ID
        assert levels[2].level_code == "18"
        assert levels[2].rank == 3

    @pytest.mark.asyncio
    async def test_find_by_channel_without_levels(self, seeded_db):
        repo = SqlHierarchyRepository(seeded_db)

        assert await repo.find_by_channel(OTHER_CHANNEL_ID) == []


class TestSqlDesignationRepository:
    """Test designation repository."""

    @pytest.mark.asyncio
    async def test_find_by_hierarchy_newest_first(self, seeded_db):
        repo = SqlDesignationRepository(seeded_db)

        designations = await repo.find_by_hierarchy_id(DIRECTOR_LEVEL_ID)

        assert [d.id for d in designations] == [ZONAL_DIRECTOR_ID, REGIONAL_DIRECTOR_ID]
        assert designations[1].name == "Regional Director"
        assert designations[1].code == "RD"

    @pytest.mark.asyncio
    async def test_find_by_hierarchy_without_designations(self, seeded_db):
        repo = SqlDesignationRepository(seeded_db)

        assert await repo.find_by_hierarchy_id(MANAGER_LEVEL_ID) == []


class TestChannelReference:
    """Test channel reference mapping when the channel row is missing."""

    @pytest.mark.asyncio
    async def test_dangling_channel_id_is_raw_reference(self, db_session):
        db_session.add(
            Designation(
                id=REGIONAL_DIRECTOR_ID,
                channel_id=CHANNEL_ID,
                hierarchy_id=DIRECTOR_LEVEL_ID,
                role_id=ROLE_ID,
                designation_name="Regional Director",
                designation_code="RD",
            )
        )
        db_session.add(
            Agent(
                id="4" * 24,
                channel_id=OTHER_CHANNEL_ID,
                designation_id=REGIONAL_DIRECTOR_ID,
                agent_code="AG0004",
            )
        )
        db_session.commit()

        agent = await SqlAgentRepository(db_session).find_by_id("4" * 24)

        assert agent.channel == ChannelId(OTHER_CHANNEL_ID)
        assert agent.channel_id == OTHER_CHANNEL_ID
