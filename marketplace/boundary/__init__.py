"""
Boundary layer for external system integrations.

Handles all interactions with the relational database.
Provides ORM models, CRUD singletons and connection management.
"""
