"""
Partner service.

Business logic for the partner profile store.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.partner import PartnerRepository
from app.models.partner import Partner
from app.schemas.partner import PartnerCreate, PartnerUpdate


class PartnerService:
    """Service for partner-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = PartnerRepository(session)

    def create(self, data: PartnerCreate) -> Partner:
        partner = Partner(**data.model_dump())
        partner = self.repository.create(partner)
        logger.info(f"Created partner {partner.id} ({partner.name})")
        return partner

    def list_partners(self) -> list[Partner]:
        return self.repository.get_all()

    def get(self, partner_id: int) -> Partner:
        """
        Get partner by ID.

        Raises:
            HTTPException: 404 if the partner does not exist
        """
        partner = self.repository.get_by_id(partner_id)
        if not partner:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Partner {partner_id} not found")
        return partner

    def update_profile(self, partner_id: int, data: PartnerUpdate) -> Partner:
        """
        Apply a partial profile update.

        Stored effort scores are left untouched; new biometrics only
        affect workouts logged or edited afterwards.
        """
        partner = self.get(partner_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(partner, field, value)
        partner.updated_at = datetime.datetime.utcnow()
        return self.repository.update(partner)

