"""Domain layer — amounts, identities, commands, validation, and encoding.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, plugins, or config.
"""
