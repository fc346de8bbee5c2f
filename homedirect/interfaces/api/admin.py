"""Admin API routes — listing moderation."""

from fastapi import APIRouter, Depends, Response, status

from homedirect.application.services.moderation_service import (
    approve_listing,
    list_pending,
    reject_listing,
)
from homedirect.domain.models.user import User
from homedirect.domain.repositories.listing_repository import ListingRepository
from homedirect.domain.schemas.listing import ListingRead
from homedirect.interfaces.api.deps import require_admin
from homedirect.interfaces.deps import get_listing_repository

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/pending-listings", response_model=list[ListingRead])
def pending_listings(
    listings: ListingRepository = Depends(get_listing_repository),
    admin: User = Depends(require_admin),
):
    return list_pending(listings, admin.is_admin)


@router.post("/listings/{listing_id}/approve", response_model=ListingRead)
def approve(
    listing_id: int,
    listings: ListingRepository = Depends(get_listing_repository),
    admin: User = Depends(require_admin),
):
    return approve_listing(listings, listing_id, admin.is_admin)


@router.post("/listings/{listing_id}/reject", status_code=status.HTTP_204_NO_CONTENT)
def reject(
    listing_id: int,
    listings: ListingRepository = Depends(get_listing_repository),
    admin: User = Depends(require_admin),
):
    reject_listing(listings, listing_id, admin.is_admin)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
