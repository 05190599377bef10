"""Domain models.

Pure data structures (Pydantic v2) mirroring the platform's JSON.
"""
