"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Field names are the wire contract (snake_case, as stored)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Request bodies are checked by core/validation.py, not by these models, so
      the check order and client messages stay under our control
"""
