"""Base DTO class."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """
    Base class for application DTOs.

    Fields exposed under a camelCase wire alias (e.g., photoName) can also be
    populated by their Python name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
