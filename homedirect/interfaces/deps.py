"""
API Dependencies.
Repositories are built per request over the store held on app.state.
"""

from fastapi import Depends, Request

from homedirect.domain.repositories.favorite_repository import FavoriteRepository
from homedirect.domain.repositories.listing_repository import ListingRepository
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.infrastructure.mailer import Notifier
from homedirect.infrastructure.repositories.favorite_repository import InMemoryFavoriteRepository
from homedirect.infrastructure.repositories.listing_repository import InMemoryListingRepository
from homedirect.infrastructure.repositories.user_repository import InMemoryUserRepository
from homedirect.infrastructure.store import InMemoryStore


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_user_repository(store: InMemoryStore = Depends(get_store)) -> UserRepository:
    """Get user repository instance."""
    return InMemoryUserRepository(store)


def get_listing_repository(store: InMemoryStore = Depends(get_store)) -> ListingRepository:
    """Get listing repository instance."""
    return InMemoryListingRepository(store)


def get_favorite_repository(store: InMemoryStore = Depends(get_store)) -> FavoriteRepository:
    """Get favorite repository instance."""
    return InMemoryFavoriteRepository(store)
