"""Domain models.

Why:
- The library's own values (request descriptor, error detail) live here as
  strict Pydantic v2 models.
- The domain knows nothing about httpx.
"""
