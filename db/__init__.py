"""
db/ - Database Layer
====================
Connection factories for SQLite and PostgreSQL, and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
