"""Favorites API routes — bookmark listings."""

from fastapi import APIRouter, Depends, Response, status

from homedirect.application.services.favorite_service import (
    is_favorite,
    list_favorites,
    toggle_favorite,
)
from homedirect.domain.models.user import User
from homedirect.domain.repositories.favorite_repository import FavoriteRepository
from homedirect.domain.repositories.listing_repository import ListingRepository
from homedirect.domain.schemas.listing import FavoriteStatus, ListingRead
from homedirect.interfaces.api.deps import get_current_user
from homedirect.interfaces.deps import get_favorite_repository, get_listing_repository

router = APIRouter(prefix="/api/favorites", tags=["Favorites"])


@router.get("", response_model=list[ListingRead])
def my_favorites(
    listings: ListingRepository = Depends(get_listing_repository),
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    user: User = Depends(get_current_user),
):
    return list_favorites(listings, favorites, user.id)


@router.get("/{listing_id}", response_model=FavoriteStatus)
def favorite_status(
    listing_id: int,
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    user: User = Depends(get_current_user),
):
    return FavoriteStatus(listing_id=listing_id, is_favorite=is_favorite(favorites, user.id, listing_id))


@router.post("/{listing_id}", status_code=status.HTTP_201_CREATED)
def add_favorite(
    listing_id: int,
    listings: ListingRepository = Depends(get_listing_repository),
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    user: User = Depends(get_current_user),
):
    toggle_favorite(listings, favorites, user.id, listing_id, on=True)
    return {"message": "Listing added to favorites"}


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_favorite(
    listing_id: int,
    listings: ListingRepository = Depends(get_listing_repository),
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    user: User = Depends(get_current_user),
):
    toggle_favorite(listings, favorites, user.id, listing_id, on=False)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
