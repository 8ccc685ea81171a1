"""
Pydantic models for the movie awards API.
"""

from awards.models.award import AwardQuery, AwardRecord

__all__ = ["AwardQuery", "AwardRecord"]
