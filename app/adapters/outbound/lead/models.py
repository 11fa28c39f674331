"""SQLAlchemy ORM models for leads."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.infrastructure.db import Base


class LeadModel(Base):
    """SQLAlchemy model for publier_projets table."""

    __tablename__ = "publier_projets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True
    )
    category = Column(String, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String(10), nullable=False)
    postal = Column(String(5), nullable=False)
    surface = Column(String(4), nullable=True)
    location = Column(String, nullable=True)
    budget = Column(String, nullable=True)  # BudgetRange value
    description = Column(Text, nullable=True)
    photo_name = Column(String, nullable=True)  # " | "-joined file names
