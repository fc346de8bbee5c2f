"""Pydantic schemas for Listing domain."""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from homedirect.domain.models.listing import ListingType, PropertyType


class ListingBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    listing_type: ListingType
    property_type: PropertyType
    region: str = Field(min_length=1)
    city: str = Field(min_length=1)
    district: str = Field(min_length=1)
    address: str = Field(min_length=1)
    price: int = Field(gt=0)
    area: float = Field(gt=0)
    rooms: int = Field(ge=0)
    photos: list[str] = Field(default_factory=list)


class ListingCreate(ListingBase):
    pass


class ListingUpdate(BaseModel):
    """Partial update. Ownership and moderation fields are not editable here."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    listing_type: Optional[ListingType] = None
    property_type: Optional[PropertyType] = None
    region: Optional[str] = Field(default=None, min_length=1)
    city: Optional[str] = Field(default=None, min_length=1)
    district: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = Field(default=None, min_length=1)
    price: Optional[int] = Field(default=None, gt=0)
    area: Optional[float] = Field(default=None, gt=0)
    rooms: Optional[int] = Field(default=None, ge=0)
    photos: Optional[list[str]] = None

    model_config = {"extra": "ignore"}

    @field_validator("*")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; null is not a value any listing field accepts
        if value is None:
            raise ValueError("must not be null")
        return value


class ListingRead(ListingBase):
    id: int
    user_id: int
    approved: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ListingFilter(BaseModel):
    """Optional search criteria. Numeric bounds stay strings: unparsable values are ignored."""
    listing_type: Optional[str] = None  # "all" disables the filter
    property_type: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    price_min: Optional[str] = None
    price_max: Optional[str] = None
    area_min: Optional[str] = None
    area_max: Optional[str] = None
    rooms: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class FavoriteStatus(BaseModel):
    listing_id: int
    is_favorite: bool
