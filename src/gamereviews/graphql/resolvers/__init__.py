"""Resolver package for the GraphQL schema.

Field, query and mutation resolvers referenced by the GraphQL types. Each
resolver reads from the shared in-memory database.
"""

# Intentionally empty; functions are defined in sibling modules.
