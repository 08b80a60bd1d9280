"""Resolver package for the GraphQL schema.

Query and field resolvers live in one module per entity kind; the pure
relationship lookups they share live in ``relationships``.
"""
