"""
Service layer - Business logic orchestration.
"""

from .directory_service import AgentDirectory, DesignationCatalog, HierarchyCatalog
from .hierarchy_service import HierarchyResolutionService

__all__ = [
    "AgentDirectory",
    "DesignationCatalog",
    "HierarchyCatalog",
    "HierarchyResolutionService",
]
