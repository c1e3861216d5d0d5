"""Services Layer — association management over an injected repository.

Invariants:
    - Services receive their repository; they never open sessions themselves
    - Identifiers arrive already validated
"""
