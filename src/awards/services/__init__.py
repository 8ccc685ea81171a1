"""
Business services for the movie awards API.

- award_lookup.py: request parsing and the key-conditioned awards query
"""

__all__: list[str] = []
