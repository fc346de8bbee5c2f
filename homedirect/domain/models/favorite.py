"""Favorite — membership of a listing in a user's bookmarks."""

from typing import NamedTuple


class Favorite(NamedTuple):
    user_id: int
    listing_id: int
