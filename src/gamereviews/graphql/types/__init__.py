"""
GraphQL type definitions
"""
