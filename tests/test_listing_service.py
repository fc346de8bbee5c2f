import pytest

from homedirect.application.services.listing_service import (
    create_listing,
    delete_listing,
    get_listing,
    list_user_listings,
    update_listing,
)
from homedirect.core.exceptions import (
    EntityNotFoundException,
    ForbiddenException,
    UnauthorizedException,
    UnverifiedException,
    ValidationFailedException,
)


def test_unverified_user_cannot_create(users, listings, make_user, listing_data):
    user = make_user("carol")

    with pytest.raises(UnverifiedException):
        create_listing(users, listings, user.id, listing_data())
    assert listings.list() == []


def test_unknown_owner_is_unauthorized(users, listings, listing_data):
    with pytest.raises(UnauthorizedException):
        create_listing(users, listings, 99, listing_data())


def test_create_listing_starts_pending(users, listings, owner, listing_data):
    listing = create_listing(users, listings, owner.id, listing_data())

    assert listing.user_id == owner.id
    assert listing.approved is False
    assert listing.listing_type.value == "sale"


def test_admin_created_listing_also_starts_pending(users, listings, admin, listing_data):
    listing = create_listing(users, listings, admin.id, listing_data())

    assert listing.approved is False


@pytest.mark.parametrize("override", [{"price": 0}, {"area": -1}, {"rooms": -2}, {"listing_type": "swap"}])
def test_invalid_fields_fail_validation(users, listings, owner, listing_data, override):
    with pytest.raises(ValidationFailedException) as exc_info:
        create_listing(users, listings, owner.id, listing_data(**override))

    assert exc_info.value.status_code == 422
    assert exc_info.value.details["errors"]


def test_pending_listing_visibility(make_listing, listings, owner, admin, make_user):
    listing = make_listing()
    stranger = make_user("mallory", is_verified=True)

    assert get_listing(listings, listing.id, owner.id) == listing
    assert get_listing(listings, listing.id, admin.id, caller_is_admin=True) == listing
    with pytest.raises(ForbiddenException):
        get_listing(listings, listing.id, stranger.id)
    with pytest.raises(ForbiddenException):
        get_listing(listings, listing.id)


def test_approved_listing_is_public(make_listing, listings):
    listing = make_listing(approved=True)

    assert get_listing(listings, listing.id) == listing


def test_get_missing_listing(listings):
    with pytest.raises(EntityNotFoundException):
        get_listing(listings, 123)


def test_owner_edit_resets_approval(make_listing, listings, owner):
    listing = make_listing(approved=True)

    updated = update_listing(listings, listing.id, owner.id, False, {"price": 55000})

    assert updated.price == 55000
    assert updated.approved is False


def test_admin_edit_keeps_approval(make_listing, listings, admin):
    listing = make_listing(approved=True)

    updated = update_listing(listings, listing.id, admin.id, True, {"title": "Renovated flat"})

    assert updated.title == "Renovated flat"
    assert updated.approved is True


def test_owner_cannot_self_approve_through_edit(make_listing, listings, owner):
    listing = make_listing()

    updated = update_listing(listings, listing.id, owner.id, False, {"approved": True, "rooms": 3})

    assert updated.approved is False
    assert updated.rooms == 3


def test_stranger_cannot_edit_or_delete(make_listing, listings, make_user):
    listing = make_listing(approved=True)
    stranger = make_user("mallory", is_verified=True)

    with pytest.raises(ForbiddenException):
        update_listing(listings, listing.id, stranger.id, False, {"price": 1})
    with pytest.raises(ForbiddenException):
        delete_listing(listings, listing.id, stranger.id, False)
    assert listings.get_by_id(listing.id) == listing


def test_null_field_in_edit_is_rejected(make_listing, listings, owner):
    listing = make_listing(approved=True)

    with pytest.raises(ValidationFailedException):
        update_listing(listings, listing.id, owner.id, False, {"title": None})
    with pytest.raises(ValidationFailedException):
        update_listing(listings, listing.id, owner.id, False, {"price": None, "rooms": 3})
    assert listings.get_by_id(listing.id) == listing


def test_store_update_with_invalid_value_raises_validation_error(make_listing, listings):
    listing = make_listing()

    with pytest.raises(ValidationFailedException):
        listings.update(listing.id, {"title": None})
    assert listings.get_by_id(listing.id) == listing


def test_edit_missing_listing(listings, owner):
    with pytest.raises(EntityNotFoundException):
        update_listing(listings, 5, owner.id, False, {"price": 1})


def test_owner_and_admin_can_delete(make_listing, listings, owner, admin):
    mine = make_listing()
    other = make_listing(approved=True)

    delete_listing(listings, mine.id, owner.id, False)
    delete_listing(listings, other.id, admin.id, True)

    assert listings.list() == []
    with pytest.raises(EntityNotFoundException):
        delete_listing(listings, mine.id, owner.id, False)


def test_user_listings_include_pending(make_listing, listings, owner):
    pending = make_listing()
    approved = make_listing(approved=True)

    assert list_user_listings(listings, owner.id) == [pending, approved]
