"""Domain layer — document model and naming predicates.

This layer depends only on stdlib.
It must never import from rules, services, plugins, or config.
"""
