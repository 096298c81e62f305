"""Domain layer — sections, records, and the intake parser.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
