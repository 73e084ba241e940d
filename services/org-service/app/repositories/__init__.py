"""
Repository layer - Data access abstractions.

This layer provides interfaces for reading the organization data,
hiding implementation details from the business logic.
"""
