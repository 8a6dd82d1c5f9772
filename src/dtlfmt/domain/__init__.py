"""Domain layer — operator catalog, rule model, parser, and formatter.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
