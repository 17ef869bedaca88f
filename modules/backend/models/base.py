"""
Base Model.

Common fields for in-memory domain records.
"""

from dataclasses import dataclass, field

from modules.backend.core.utils import new_id, utc_timestamp


@dataclass(kw_only=True)
class Entity:
    """Base class for records with an opaque, immutable identifier."""

    id: str = field(default_factory=new_id)


@dataclass(kw_only=True)
class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: str = field(default_factory=utc_timestamp)
    updated_at: str = ""

    def __post_init__(self) -> None:
        if not self.updated_at:
            self.updated_at = self.created_at

    def touch(self) -> None:
        """Refresh updated_at."""
        self.updated_at = utc_timestamp()
