"""
Top‑level package for the Task Board API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
