"""Shared fixtures: a fresh store and repositories per test."""

import pytest

from homedirect.application.services import verification_service
from homedirect.application.services.auth_service import hash_password
from homedirect.infrastructure.repositories.favorite_repository import InMemoryFavoriteRepository
from homedirect.infrastructure.repositories.listing_repository import InMemoryListingRepository
from homedirect.infrastructure.repositories.user_repository import InMemoryUserRepository
from homedirect.infrastructure.store import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def users(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def listings(store):
    return InMemoryListingRepository(store)


@pytest.fixture
def favorites(store):
    return InMemoryFavoriteRepository(store)


class RecordingNotifier:
    """Keeps every message it is asked to send."""

    def __init__(self):
        self.sent = []

    def send(self, to, subject, body):
        self.sent.append((to, subject, body))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fixed_code(monkeypatch):
    """Make every issued verification code 123456."""
    monkeypatch.setattr(verification_service, "generate_verification_code", lambda: "123456")
    return "123456"


@pytest.fixture
def make_user(users):
    def _make_user(username="alice", is_verified=False, is_admin=False, **extra):
        data = {
            "username": username,
            "email": f"{username}@x.com",
            "password_hash": hash_password("secret123"),
            "first_name": username.title(),
            "last_name": "Tester",
            "is_verified": is_verified,
            "is_admin": is_admin,
        }
        data.update(extra)
        return users.create(data)

    return _make_user


@pytest.fixture
def admin(make_user):
    return make_user("root", is_verified=True, is_admin=True)


@pytest.fixture
def owner(make_user):
    return make_user("alice", is_verified=True)


@pytest.fixture
def listing_data():
    def _listing_data(**overrides):
        data = {
            "title": "Flat",
            "description": "Two rooms near the park",
            "listing_type": "sale",
            "property_type": "apartment",
            "region": "Kyivska",
            "city": "Kyiv",
            "district": "Podil",
            "address": "Khoryva St, 1",
            "price": 50000,
            "area": 54.5,
            "rooms": 2,
            "photos": ["https://img.example/1.jpg", "https://img.example/2.jpg"],
        }
        data.update(overrides)
        return data

    return _listing_data


@pytest.fixture
def make_listing(listings, owner, listing_data):
    """Store a listing directly, optionally already approved."""
    def _make_listing(approved=False, user_id=None, **overrides):
        listing = listings.create({**listing_data(**overrides), "user_id": user_id or owner.id})
        if approved:
            listing = listings.update(listing.id, {"approved": True})
        return listing

    return _make_listing
