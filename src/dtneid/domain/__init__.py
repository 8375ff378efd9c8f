"""Domain layer — endpoint values, parsing, and rendering.

This layer depends only on stdlib and pydantic.
It must never import from codec, services, commands, or config.
"""
