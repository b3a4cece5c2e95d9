"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the database and return domain model objects,
and translate driver failures into the errors in repositories.exceptions.
"""
