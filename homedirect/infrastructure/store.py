"""
In-memory entity store.

One instance holds every table of the application for the lifetime of the
process. It is created once at startup (or per test) and handed to the
repositories, never imported as a global.
"""

import itertools
import threading
from typing import Dict, Iterator

from homedirect.domain.models.favorite import Favorite


class Table:
    """id -> record map with its own lock and a monotonic id sequence.

    Ids start at 1 and are never reused, even after a delete.
    """

    def __init__(self, name: str):
        self.name = name
        self.rows: Dict[int, object] = {}
        self.lock = threading.RLock()
        self._ids: Iterator[int] = itertools.count(1)

    def next_id(self) -> int:
        with self.lock:
            return next(self._ids)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self):
        return f"<Table {self.name} rows={len(self.rows)}>"


class FavoriteIndex:
    """Insertion-ordered set of (user_id, listing_id) pairs."""

    def __init__(self):
        self.pairs: Dict[Favorite, None] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self.pairs)


class InMemoryStore:
    """Users, listings and favorites.

    Lock order when more than one collection is touched: listings, then
    favorites. Users are never held together with another lock.
    """

    def __init__(self):
        self.users = Table("users")
        self.listings = Table("listings")
        self.favorites = FavoriteIndex()

    def __repr__(self):
        return (
            f"<InMemoryStore users={len(self.users)} "
            f"listings={len(self.listings)} favorites={len(self.favorites)}>"
        )
