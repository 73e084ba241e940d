"""
Shared dependencies for the application.

Provides dependency injection functions used across routers. Services are
built per request on top of the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .config import settings
from .database import get_db
from .repositories.sql_repository import (
    SqlAgentRepository,
    SqlDesignationRepository,
    SqlHierarchyRepository,
)
from .services.directory_service import AgentDirectory, DesignationCatalog, HierarchyCatalog
from .services.hierarchy_service import HierarchyResolutionService


def get_agent_directory(db: Session = Depends(get_db)) -> AgentDirectory:
    return AgentDirectory(SqlAgentRepository(db))


def get_hierarchy_catalog(db: Session = Depends(get_db)) -> HierarchyCatalog:
    return HierarchyCatalog(SqlHierarchyRepository(db))


def get_designation_catalog(db: Session = Depends(get_db)) -> DesignationCatalog:
    return DesignationCatalog(SqlDesignationRepository(db), SqlAgentRepository(db))


def get_hierarchy_service(
    agents: AgentDirectory = Depends(get_agent_directory),
    hierarchies: HierarchyCatalog = Depends(get_hierarchy_catalog),
    designations: DesignationCatalog = Depends(get_designation_catalog),
) -> HierarchyResolutionService:
    """
    Get hierarchy resolution service for dependency injection.

    The anchor level code comes from the service settings.
    """
    return HierarchyResolutionService(
        agents=agents,
        hierarchies=hierarchies,
        designations=designations,
        anchor_level_code=settings.ANCHOR_LEVEL_CODE,
    )
