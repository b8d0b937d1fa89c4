"""Domain layer — text transforms, record models, and ordering rules.

This layer depends only on stdlib, pydantic, ruamel.yaml and structlog.
It must never import from services, infrastructure, commands, or config.
"""
