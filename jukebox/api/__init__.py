"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; all errors return {"error": <string>}

Design Decisions:
    - Thin routes: validate at the boundary, delegate to AssociationManager
"""
