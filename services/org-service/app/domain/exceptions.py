"""
Custom exceptions for the org service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.). Errors raised by the
database layer are never wrapped in these types.
"""

from typing import Any, Optional


class OrgServiceException(Exception):
    """Base exception for all org service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(OrgServiceException):
    """Raised when a requested entity does not exist."""


class AgentNotFoundException(NotFoundException):
    """Raised when an agent cannot be found."""

    def __init__(self, agent_id: str):
        super().__init__(message="Agent not found", details={"agent_id": agent_id})


class DesignationNotFoundException(NotFoundException):
    """Raised when no designation with the given name exists at a hierarchy level."""

    def __init__(self, designation_name: str, hierarchy_id: Optional[str] = None):
        message = f"Designation not found: {designation_name}"
        super().__init__(
            message=message,
            details={"designation_name": designation_name, "hierarchy_id": hierarchy_id},
        )


class ConfigurationException(OrgServiceException):
    """Raised when administrative data setup prevents a resolution."""


class AnchorLevelNotFoundException(ConfigurationException):
    """Raised when a channel has no hierarchy level carrying the anchor level code."""

    def __init__(self, level_code: str, channel_id: Optional[str] = None):
        super().__init__(
            message=f"Target hierarchy level {level_code} not found",
            details={"level_code": level_code, "channel_id": channel_id},
        )


class ChannelNotResolvedException(ConfigurationException):
    """Raised when an agent record carries no usable channel reference."""

    def __init__(self, agent_id: str):
        super().__init__(
            message=f"Channel could not be resolved for agent {agent_id}",
            details={"agent_id": agent_id},
        )


class ValidationException(OrgServiceException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
