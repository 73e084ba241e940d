"""
Domain layer - Core business entities and domain logic.

This layer contains the organization entities and the hierarchy resolution
rules, independent of any infrastructure or framework concerns.
"""
