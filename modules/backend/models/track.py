"""
Track Model.

Entry in the read-only music catalog.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Track:
    id: int
    title: str
    author: str
    year: int
    cover: str
