"""Domain layer: amount rules, coin catalog, and conversion math.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
