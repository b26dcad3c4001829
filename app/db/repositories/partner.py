"""
Partner repository.

Handles database operations for the Partner model (the profile store).
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.partner import Partner


class PartnerRepository:
    """Repository for Partner database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, partner: Partner) -> Partner:
        """
        Create a new partner in the database.

        Args:
            partner: Partner instance to create

        Returns:
            Created partner with generated id
        """
        self.session.add(partner)
        self.session.commit()
        self.session.refresh(partner)
        return partner

    def get_by_id(self, partner_id: int) -> Optional[Partner]:
        """
        Get partner by ID.

        Args:
            partner_id: Partner ID

        Returns:
            Partner instance if found, None otherwise
        """
        return self.session.get(Partner, partner_id)

    def get_all(self) -> list[Partner]:
        """Return every partner ordered by id."""
        statement = select(Partner).order_by(Partner.id)
        return list(self.session.exec(statement).all())

    def get_all_ids(self) -> list[int]:
        statement = select(Partner.id).order_by(Partner.id)
        return list(self.session.exec(statement).all())

    def update(self, partner: Partner) -> Partner:
        """
        Update an existing partner.

        Args:
            partner: Partner instance with updated data

        Returns:
            Updated partner
        """
        self.session.add(partner)
        self.session.commit()
        self.session.refresh(partner)
        return partner
