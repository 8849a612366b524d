"""
Presentation Layer - HTTP adapter over the application use cases.
"""
