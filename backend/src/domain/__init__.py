"""
Domain Layer - Entities, value objects and repository ports.

This layer has no dependencies on application or infrastructure code.
"""
