from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

PlaceKind = Literal["restaurant", "hotel", "landmark", "beach", "shop", "event", "tour", "activity"]
PriceRange = Literal["$", "$$", "$$$", "$$$$"]


class ApiKeyCreate(BaseModel):
    owner_email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")


class ApiKeyIssuedOut(BaseModel):
    id: str
    owner_email: str
    api_key: str


class DepartmentUpsert(BaseModel):
    name: str = Field(..., min_length=2, max_length=200)
    intro: str | None = None
    hero_url: str | None = Field(default=None, max_length=500)
    is_published: bool = False


class DepartmentOut(BaseModel):
    id: str
    slug: str
    name: str
    intro: str | None
    hero_url: str | None
    is_published: bool


class CityUpsert(BaseModel):
    name: str = Field(..., min_length=2, max_length=200)
    summary: str | None = None
    hero_url: str | None = Field(default=None, max_length=500)
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    is_published: bool = False


class CityOut(BaseModel):
    id: str
    department_id: str
    slug: str
    name: str
    summary: str | None
    lat: float | None
    lng: float | None
    is_published: bool


class PlaceUpsert(BaseModel):
    kind: PlaceKind
    name: str = Field(..., min_length=2, max_length=200)
    description: str | None = None
    address: str | None = Field(default=None, max_length=300)
    phone: str | None = Field(default=None, max_length=60)
    website: str | None = Field(default=None, max_length=500)
    booking_url: str | None = Field(default=None, max_length=500)
    menu_url: str | None = Field(default=None, max_length=500)
    price_range: PriceRange | None = None
    opening_hours: str | None = Field(default=None, max_length=300)
    gps_coordinates: str | None = Field(default=None, max_length=80)
    cover_url: str | None = Field(default=None, max_length=500)
    entrance_fee: str | None = Field(default=None, max_length=120)
    best_visiting_time: str | None = Field(default=None, max_length=200)
    historical_significance: str | None = None
    accessibility: str | None = None
    guided_tours: str | None = None
    parking_info: str | None = None
    directions_text: str | None = None
    unesco_site: bool = False
    event_date: datetime | None = None
    is_featured: bool = False
    is_published: bool = False


class PlaceOut(BaseModel):
    id: str
    city_id: str
    kind: str
    slug: str
    name: str
    price_range: str | None
    is_featured: bool
    is_published: bool


class PublishToggle(BaseModel):
    is_published: bool
