"""
Data access layer.

Repositories own the SQL for a table and convert rows to schema
instances.  They receive a ``Database`` handle at construction.
"""
