"""Infrastructure layer: local data access for the coin catalog.

Infrastructure may import from domain and config.
It must never import from services, commands, or output.
"""
