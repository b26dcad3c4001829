"""
Partner endpoints.

Profile store: list, create, read and partially update partners.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_partner
from app.db.session import get_db
from app.models.partner import Partner
from app.schemas.partner import PartnerCreate, PartnerResponse, PartnerUpdate
from app.services.partner_service import PartnerService

router = APIRouter()


@router.get("", summary="List partners.", response_model=list[PartnerResponse], )
def list_partners(db: Session = Depends(get_db)):
    return PartnerService(db).list_partners()


@router.post("", summary="Create a partner.", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED, )
def create_partner(data: PartnerCreate, db: Session = Depends(get_db)):
    return PartnerService(db).create(data)


@router.get("/{partner_id}", summary="Get a partner profile.", response_model=PartnerResponse, )
def read_partner(partner: Partner = Depends(get_partner)):
    return partner


@router.patch("/{partner_id}", summary="Update a partner profile.", response_model=PartnerResponse, )
def update_partner(partner_id: int, data: PartnerUpdate, db: Session = Depends(get_db)):
    """
    Partially update a partner's profile.

    Existing effort scores are not recomputed.
    """
    return PartnerService(db).update_profile(partner_id, data)
