"""Listing domain model — a property offered for sale or rent."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ListingType(str, Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    COMMERCIAL = "commercial"
    LAND = "land"


class Listing(BaseModel):
    id: int
    user_id: int
    title: str
    description: str
    listing_type: ListingType
    property_type: PropertyType
    region: str
    city: str
    district: str
    address: str
    price: int
    area: float
    rooms: int
    photos: list[str] = Field(default_factory=list)  # first photo is the primary one

    # Moderation: False = pending, True = publicly visible
    approved: bool = False

    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def primary_photo(self) -> Optional[str]:
        return self.photos[0] if self.photos else None

    def __repr__(self):
        return f"<Listing {self.id} - {self.title}>"
