"""
API routers for org service endpoints.
"""

from . import agent_router, catalog_router, health_router

__all__ = ["agent_router", "catalog_router", "health_router"]
