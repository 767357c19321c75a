"""Domain layer: bill model, error codes, and exceptions.

This layer depends only on stdlib and pydantic.
It must never import from services or config, and never logs.
"""
