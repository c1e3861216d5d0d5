"""Infrastructure Layer — database engine, repositories, and cross-cutting concerns.

Invariants:
    - Infrastructure implements the contracts in core/repository_protocols.py
    - Every driver failure leaves this layer as a JukeboxError subclass

Design Decisions:
    - Error classification kept next to the repository that needs it
"""
