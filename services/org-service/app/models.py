"""
Database models for org service.

This module defines SQLAlchemy ORM models for the sales organization:
channels, hierarchy levels, designations and agents. Every table uses a
24-character hexadecimal identifier so ids stay compatible with the
document-store ids already issued to clients.
"""

import uuid
from typing import Any

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base: Any = declarative_base()

# Constants
OBJECT_ID_LENGTH = 24


def generate_object_id() -> str:
    """Generate a new 24-character hexadecimal identifier."""
    return uuid.uuid4().hex[:OBJECT_ID_LENGTH]


class Channel(Base):
    """
    Business line partition.

    Every hierarchy level, designation and agent belongs to exactly one channel.
    """

    __tablename__ = "channels"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=generate_object_id)
    channel_name = Column(String(100), nullable=False)
    channel_code = Column(String(20), nullable=False, unique=True, index=True)
    channel_status = Column(String(20), nullable=False, default="active")
    is_deleted = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)


class Hierarchy(Base):
    """
    One rung of a channel's organization chart.

    Attributes:
        hierarchy_level_code: Short token identifying the level (e.g. "18")
        hierarchy_level: Numeric rank, lower is more senior
        hierarchy_order: Tie-break between levels sharing a rank
        hierarchy_parent_id: Optional parent level (informational only)
    """

    __tablename__ = "hierarchies"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=generate_object_id)
    channel_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("channels.id"), nullable=False, index=True
    )
    hierarchy_name = Column(String(100), nullable=False)
    hierarchy_level_code = Column(String(20), nullable=False)
    hierarchy_level = Column(Integer, nullable=False)
    hierarchy_parent_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("hierarchies.id"), nullable=True, index=True
    )
    hierarchy_description = Column(Text, nullable=True)
    hierarchy_order = Column(Integer, nullable=False, default=0)
    hierarchy_status = Column(String(20), nullable=False, default="active")
    is_deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_hierarchy_channel_level", "channel_id", "hierarchy_level"),
        Index("idx_hierarchy_channel_code", "channel_id", "hierarchy_level_code"),
    )


class Designation(Base):
    """Job title anchored to one hierarchy level, one channel and one role."""

    __tablename__ = "designations"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=generate_object_id)
    channel_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("channels.id"), nullable=False, index=True
    )
    hierarchy_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("hierarchies.id"), nullable=False, index=True
    )
    role_id = Column(String(OBJECT_ID_LENGTH), nullable=False)
    designation_name = Column(String(100), nullable=False)
    designation_code = Column(String(20), nullable=False)
    designation_status = Column(String(20), nullable=False, default="active")
    is_deleted = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_designation_channel_code", "channel_id", "designation_code", unique=True),
    )


class Agent(Base):
    """
    Sales agent occupying one designation within one channel.

    Team lead and reporting manager are optional self references.
    """

    __tablename__ = "agents"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=generate_object_id)
    channel_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("channels.id"), nullable=True, index=True
    )
    designation_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("designations.id"), nullable=False, index=True
    )
    agent_code = Column(String(30), nullable=False, unique=True)
    first_name = Column(String(100), nullable=True)
    middle_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    display_name = Column(String(255), nullable=True)
    agent_status = Column(String(20), nullable=False, default="active", index=True)
    team_lead_id = Column(String(OBJECT_ID_LENGTH), ForeignKey("agents.id"), nullable=True)
    reporting_manager_id = Column(
        String(OBJECT_ID_LENGTH), ForeignKey("agents.id"), nullable=True
    )
    is_deleted = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    channel = relationship("Channel", lazy="joined")

    __table_args__ = (
        Index("idx_agent_designation_channel", "designation_id", "channel_id"),
    )
