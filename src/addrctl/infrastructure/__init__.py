"""Infrastructure layer — JSON file persistence.

This layer depends on stdlib and pydantic for (de)serialization.
It may import domain models but never logic, commands, or output.
"""
