"""
Track Schemas.
"""

from modules.backend.schemas.base import CamelModel


class TrackResponse(CamelModel):
    id: int
    title: str
    author: str
    year: int
    cover: str
