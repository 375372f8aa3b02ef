"""Domain layer: schema migration, responsive values, universal template data.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
