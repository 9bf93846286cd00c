"""Domain layer: vertices, edges, graphs, and traversals.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
