# Pydantic schemas package
from modules.backend.schemas.base import (
    CamelModel,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
]
