"""Postgres-backed lead repository adapter."""

from datetime import timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.lead import Lead, NewLead
from app.application.ports.lead_repository import LeadRepository
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import LeadModel


class PostgresLeadRepository(LeadRepository):
    """Postgres implementation of lead repository."""

    def _model_to_dto(self, model: LeadModel) -> Lead:
        """
        Convert LeadModel to Lead DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Lead DTO
        """
        # Ensure created_at is timezone-aware (SQLite returns naive datetimes)
        created_at = model.created_at
        if created_at and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Lead(
            id=model.id,
            created_at=created_at,
            category=model.category,
            name=model.name,
            phone=model.phone,
            postal=model.postal,
            surface=model.surface,
            location=model.location,
            budget=model.budget,
            description=model.description,
            photo_name=model.photo_name,
        )

    async def add(self, lead: NewLead) -> Lead:
        """
        Insert a lead; id and created_at are assigned by the database.

        Args:
            lead: Normalized lead to insert

        Returns:
            Persisted lead

        Raises:
            SQLAlchemyError: If the insert fails
        """
        db: Session = get_db_session()
        try:
            model = LeadModel(**lead.model_dump())
            db.add(model)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while inserting lead: {str(e)}")
            raise
        finally:
            db.close()

    async def list_recent(self, limit: int = 200) -> list[Lead]:
        """
        List the most recent leads.

        Args:
            limit: Maximum number of leads returned

        Returns:
            Leads ordered by created_at descending

        Raises:
            SQLAlchemyError: If the query fails
        """
        db: Session = get_db_session()
        try:
            models = (
                db.query(LeadModel)
                .order_by(LeadModel.created_at.desc(), LeadModel.id.desc())
                .limit(limit)
                .all()
            )
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing leads: {str(e)}")
            raise
        finally:
            db.close()
