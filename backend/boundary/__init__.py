"""
Boundary layer for external system integrations.

Handles all interactions with storage: the SQL database and the key-value
course store built on it.
"""
