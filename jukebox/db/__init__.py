"""Database Package — declarative base, script session factory, and seed data.

Invariants:
    - Base is the single source of truth for table metadata
    - Nothing here is imported by request handling except Base
"""
