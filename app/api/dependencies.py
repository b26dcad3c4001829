"""
Shared API dependencies.

Reusable FastAPI dependencies for resolving path resources.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_db
from app.models.partner import Partner
from app.services.partner_service import PartnerService


def get_partner(partner_id: int, db: Session = Depends(get_db), ) -> Partner:
    """Resolve the ``{partner_id}`` path parameter or fail with 404."""
    return PartnerService(db).get(partner_id)
