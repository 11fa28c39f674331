"""Lead DTOs."""

from datetime import datetime
from typing import Optional

from app.application.dtos.base import DTO


class NewLead(DTO):
    """Normalized lead ready to be inserted."""

    category: str
    name: str
    phone: str
    postal: str
    surface: Optional[str] = None
    location: Optional[str] = None
    budget: Optional[str] = None
    description: Optional[str] = None
    photo_name: Optional[str] = None


class Lead(NewLead):
    """Persisted lead with server-assigned id and timestamp."""

    id: int
    created_at: datetime
