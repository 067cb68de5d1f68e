"""Domain layer: byte operations, types, and notation.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
