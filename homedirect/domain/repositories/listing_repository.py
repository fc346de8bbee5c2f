"""
Listing Repository Interface.
Defines specific data access operations for Listings.
"""

from typing import List

from homedirect.domain.repositories.base import BaseRepository
from homedirect.domain.models.listing import Listing


class ListingRepository(BaseRepository[Listing]):
    """Interface for Listing-specific operations.

    ``delete`` must also purge every favorite that references the listing.
    """

    def list_approved(self) -> List[Listing]:
        """Listings visible to the public."""
        ...

    def list_pending(self) -> List[Listing]:
        """Listings awaiting moderation."""
        ...

    def list_by_owner(self, user_id: int) -> List[Listing]:
        """All listings of one user, whatever their moderation state."""
        ...
