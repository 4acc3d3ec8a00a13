"""
Pydantic schema definitions for API payloads.

Schemas are separated from storage so the API representation does not
depend on how tasks are persisted.
"""
