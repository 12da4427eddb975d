"""Domain layer — graph model and traversal algorithms.

This layer depends only on stdlib and networkx.
It must never import from services, infrastructure, commands, or config.
"""
