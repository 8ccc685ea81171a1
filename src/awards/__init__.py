"""
Core business logic package for the movie awards API.

All business logic, data access, and request parsing live here.
Lambda handlers in src/handlers/ are thin wrappers that call into awards/.
"""

__all__: list[str] = []
