"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
and the database, configuration and logging integrations.
"""
