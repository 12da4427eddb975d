"""Infrastructure layer — graph sources (random generation, matrix files).

Produces Graph instances for the service layer; contains no traversal logic.
"""
