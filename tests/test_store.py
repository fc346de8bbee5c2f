import pytest

from homedirect.core.exceptions import EntityNotFoundException


def test_ids_are_sequential_and_never_reused(make_listing, listings):
    first = make_listing()
    second = make_listing()
    assert (first.id, second.id) == (1, 2)

    listings.delete(second.id)
    third = make_listing()

    assert third.id == 3


def test_create_user_defaults(users, make_user):
    user = make_user("bob")

    assert user.id == 1
    assert user.is_admin is False
    assert user.is_verified is False
    assert user.verification_code is None
    assert user.created_at is not None
    assert users.get_by_id(user.id) == user


def test_user_lookups_are_case_insensitive(users, make_user):
    user = make_user("Alice")

    assert users.get_by_username("ALICE") == user
    assert users.get_by_email("alice@X.COM") == user
    assert users.get_by_username("alic") is None


def test_update_user_merges_fields(users, make_user):
    user = make_user()

    updated = users.update(user.id, {"phone_number": "+380501112233"})

    assert updated.phone_number == "+380501112233"
    assert updated.username == user.username
    # Earlier snapshots are not mutated
    assert user.phone_number is None


def test_update_missing_user_raises(users):
    with pytest.raises(EntityNotFoundException):
        users.update(42, {"first_name": "Ghost"})


def test_listing_starts_pending_even_if_asked_otherwise(listings, owner, listing_data):
    listing = listings.create({**listing_data(), "user_id": owner.id, "approved": True})

    assert listing.approved is False
    assert listing.primary_photo == "https://img.example/1.jpg"


def test_listing_update_cannot_change_owner(listings, make_listing):
    listing = make_listing()

    updated = listings.update(listing.id, {"user_id": 999, "title": "Loft"})

    assert updated.user_id == listing.user_id
    assert updated.title == "Loft"
    assert updated.updated_at is not None


def test_delete_missing_listing_raises(listings):
    with pytest.raises(EntityNotFoundException):
        listings.delete(7)


def test_delete_listing_cascades_to_favorites(listings, favorites, make_listing):
    kept = make_listing()
    doomed = make_listing()
    favorites.add(1, doomed.id)
    favorites.add(2, doomed.id)
    favorites.add(1, kept.id)

    listings.delete(doomed.id)

    assert not favorites.exists(1, doomed.id)
    assert not favorites.exists(2, doomed.id)
    assert favorites.exists(1, kept.id)


def test_secondary_queries(listings, make_listing, make_user):
    other = make_user("bob", is_verified=True)
    pending = make_listing()
    approved = make_listing(approved=True)
    foreign = make_listing(user_id=other.id)

    assert listings.list_approved() == [approved]
    assert listings.list_pending() == [pending, foreign]
    assert listings.list_by_owner(other.id) == [foreign]
