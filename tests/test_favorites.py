import pytest

from homedirect.application.services.favorite_service import (
    is_favorite,
    list_favorites,
    toggle_favorite,
)
from homedirect.application.services.listing_service import delete_listing, update_listing
from homedirect.core.exceptions import EntityNotFoundException


def test_toggle_on_is_idempotent(make_listing, listings, favorites, owner, store):
    listing = make_listing(approved=True)

    toggle_favorite(listings, favorites, owner.id, listing.id, on=True)
    snapshot = dict(store.favorites.pairs)
    toggle_favorite(listings, favorites, owner.id, listing.id, on=True)

    assert store.favorites.pairs == snapshot
    assert is_favorite(favorites, owner.id, listing.id)
    assert list_favorites(listings, favorites, owner.id) == [listing]


def test_toggle_off_absent_favorite_is_noop(listings, favorites, owner):
    toggle_favorite(listings, favorites, owner.id, 77, on=False)

    assert not is_favorite(favorites, owner.id, 77)


def test_cannot_favorite_missing_listing(listings, favorites, owner):
    with pytest.raises(EntityNotFoundException):
        toggle_favorite(listings, favorites, owner.id, 77, on=True)


def test_favorites_hide_unapproved_listings(make_listing, listings, favorites, owner, make_user):
    listing = make_listing(approved=True)
    fan = make_user("fan")
    toggle_favorite(listings, favorites, fan.id, listing.id, on=True)

    # Owner edit sends the listing back to moderation
    update_listing(listings, listing.id, owner.id, False, {"price": 60000})

    assert list_favorites(listings, favorites, fan.id) == []
    assert is_favorite(favorites, fan.id, listing.id)


def test_deleting_listing_removes_it_from_every_favorites_list(make_listing, listings, favorites, owner, make_user):
    listing = make_listing(approved=True)
    survivor = make_listing(approved=True, title="House")
    bob = make_user("bob")
    carol = make_user("carol")
    for user in (bob, carol):
        toggle_favorite(listings, favorites, user.id, listing.id, on=True)
    toggle_favorite(listings, favorites, bob.id, survivor.id, on=True)

    delete_listing(listings, listing.id, owner.id, False)

    assert list_favorites(listings, favorites, bob.id) == [survivor]
    assert list_favorites(listings, favorites, carol.id) == []


def test_favorites_keep_insertion_order(make_listing, listings, favorites, owner):
    first = make_listing(approved=True)
    second = make_listing(approved=True)
    toggle_favorite(listings, favorites, owner.id, second.id, on=True)
    toggle_favorite(listings, favorites, owner.id, first.id, on=True)

    assert list_favorites(listings, favorites, owner.id) == [second, first]
