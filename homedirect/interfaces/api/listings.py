"""Listings API routes — browse, filter and manage property listings."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from homedirect.application.services.listing_service import (
    create_listing,
    delete_listing,
    get_listing,
    list_approved,
    list_user_listings,
    update_listing,
)
from homedirect.domain.models.user import User
from homedirect.domain.repositories.listing_repository import ListingRepository
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.domain.schemas.listing import ListingCreate, ListingFilter, ListingRead, ListingUpdate
from homedirect.interfaces.api.deps import get_current_user, get_optional_user
from homedirect.interfaces.deps import get_listing_repository, get_user_repository

router = APIRouter(prefix="/api", tags=["Listings"])


@router.get("/listings", response_model=list[ListingRead])
def list_listings(
    listing_type: Optional[str] = None,
    property_type: Optional[str] = None,
    region: Optional[str] = None,
    city: Optional[str] = None,
    district: Optional[str] = None,
    price_min: Optional[str] = None,
    price_max: Optional[str] = None,
    area_min: Optional[str] = None,
    area_max: Optional[str] = None,
    rooms: Optional[str] = None,
    listings: ListingRepository = Depends(get_listing_repository),
):
    filters = ListingFilter(
        listing_type=listing_type,
        property_type=property_type,
        region=region,
        city=city,
        district=district,
        price_min=price_min,
        price_max=price_max,
        area_min=area_min,
        area_max=area_max,
        rooms=rooms,
    )
    return list_approved(listings, filters)


@router.get("/listings/{listing_id}", response_model=ListingRead)
def read_listing(
    listing_id: int,
    listings: ListingRepository = Depends(get_listing_repository),
    user: Optional[User] = Depends(get_optional_user),
):
    return get_listing(
        listings,
        listing_id,
        caller_id=user.id if user else None,
        caller_is_admin=bool(user and user.is_admin),
    )


@router.post("/listings", response_model=ListingRead, status_code=status.HTTP_201_CREATED)
def add_listing(
    body: ListingCreate,
    users: UserRepository = Depends(get_user_repository),
    listings: ListingRepository = Depends(get_listing_repository),
    user: User = Depends(get_current_user),
):
    return create_listing(users, listings, user.id, body)


@router.put("/listings/{listing_id}", response_model=ListingRead)
def edit_listing(
    listing_id: int,
    body: ListingUpdate,
    listings: ListingRepository = Depends(get_listing_repository),
    user: User = Depends(get_current_user),
):
    return update_listing(listings, listing_id, user.id, user.is_admin, body)


@router.delete("/listings/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_listing(
    listing_id: int,
    listings: ListingRepository = Depends(get_listing_repository),
    user: User = Depends(get_current_user),
):
    delete_listing(listings, listing_id, user.id, user.is_admin)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user/listings", response_model=list[ListingRead])
def my_listings(
    listings: ListingRepository = Depends(get_listing_repository),
    user: User = Depends(get_current_user),
):
    return list_user_listings(listings, user.id)
