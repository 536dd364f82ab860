"""Domain layer — card data value objects and enumerations.

This layer depends only on stdlib.
It must never import from services, config, commands, or output.
"""
