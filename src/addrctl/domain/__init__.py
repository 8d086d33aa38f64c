"""Domain layer — records, field rules, and the in-memory model.

This layer depends only on stdlib and pydantic.
It must never import from logic, infrastructure, commands, or config.
"""
