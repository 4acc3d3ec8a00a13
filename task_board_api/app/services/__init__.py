"""
Service layer.

Services encapsulate business rules and depend on storage only
through the task store port, so the engine behind it can change
without touching API handlers.
"""
