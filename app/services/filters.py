"""
Filtering and sorting for place listings.

All of these operate on lists that were already loaded for the page; the
query-string names match the ones the listing pages link with.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping
from urllib.parse import urlencode

from app.models.place import Place

ALL = "all"
PRICE_RANGES = ("$", "$$", "$$$", "$$$$")
RESTAURANT_TYPES = ("restaurant", "shop")
RENTAL_SORTS = ("featured", "price_low", "price_high", "name")
RENTALS_DIRECTORY_SORTS = ("featured", "name", "location")


def _text_matches(term: str, *fields: str | None) -> bool:
    needle = term.lower()
    return any(f and needle in f.lower() for f in fields)


def _choice(params: Mapping[str, str], key: str, allowed: Iterable[str], default: str = ALL) -> str:
    value = (params.get(key) or "").strip()
    return value if value in allowed else default


def _featured_first(places: list[Place]) -> list[Place]:
    # sorted() is stable, so the incoming order survives inside each group
    return sorted(places, key=lambda p: not p.is_featured)


def _query_string(pairs: list[tuple[str, str]]) -> str:
    return urlencode(pairs) if pairs else ""


@dataclass(frozen=True)
class RestaurantFilter:
    search: str = ""
    type: str = ALL
    price: str = ALL
    featured_only: bool = False

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "RestaurantFilter":
        return cls(
            search=(params.get("search") or "").strip(),
            type=_choice(params, "type", RESTAURANT_TYPES),
            price=_choice(params, "price", PRICE_RANGES),
            featured_only=params.get("featured") == "true",
        )

    @property
    def is_active(self) -> bool:
        return bool(self.search) or self.type != ALL or self.price != ALL or self.featured_only

    def matches(self, place: Place) -> bool:
        if self.search and not _text_matches(self.search, place.name, place.description):
            return False
        if self.type != ALL and place.kind != self.type:
            return False
        if self.price != ALL and place.price_range != self.price:
            return False
        if self.featured_only and not place.is_featured:
            return False
        return True

    def apply(self, places: Iterable[Place]) -> list[Place]:
        return [p for p in places if self.matches(p)]

    def query_string(self) -> str:
        pairs = []
        if self.search:
            pairs.append(("search", self.search))
        if self.type != ALL:
            pairs.append(("type", self.type))
        if self.price != ALL:
            pairs.append(("price", self.price))
        if self.featured_only:
            pairs.append(("featured", "true"))
        return _query_string(pairs)


def type_counts(places: list[Place]) -> dict[str, int]:
    counts = {ALL: len(places)}
    for kind in RESTAURANT_TYPES:
        counts[kind] = sum(1 for p in places if p.kind == kind)
    return counts


@dataclass(frozen=True)
class RentalFilter:
    """Rentals inside a single city."""

    search: str = ""
    price: str = ALL
    featured_only: bool = False
    sort: str = "featured"

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "RentalFilter":
        return cls(
            search=(params.get("search") or "").strip(),
            price=_choice(params, "price", PRICE_RANGES),
            featured_only=params.get("featured") == "true",
            sort=_choice(params, "sort", RENTAL_SORTS, default="featured"),
        )

    @property
    def is_active(self) -> bool:
        return bool(self.search) or self.price != ALL or self.featured_only

    def matches(self, place: Place) -> bool:
        if self.search and not _text_matches(self.search, place.name, place.description, place.address):
            return False
        if self.price != ALL and place.price_range != self.price:
            return False
        if self.featured_only and not place.is_featured:
            return False
        return True

    def apply(self, places: Iterable[Place]) -> list[Place]:
        found = [p for p in places if self.matches(p)]
        if self.sort == "price_low":
            return sorted(found, key=lambda p: p.price_level)
        if self.sort == "price_high":
            return sorted(found, key=lambda p: p.price_level, reverse=True)
        if self.sort == "name":
            return sorted(found, key=lambda p: p.name.casefold())
        return _featured_first(found)

    def query_string(self) -> str:
        pairs = []
        if self.search:
            pairs.append(("search", self.search))
        if self.price != ALL:
            pairs.append(("price", self.price))
        if self.featured_only:
            pairs.append(("featured", "true"))
        if self.sort != "featured":
            pairs.append(("sort", self.sort))
        return _query_string(pairs)


@dataclass(frozen=True)
class RentalsDirectoryFilter:
    """Country-wide rentals; places must have city and city.department loaded."""

    search: str = ""
    department: str = ALL
    city: str = ALL
    price: str = ALL
    type: str = ALL
    featured_only: bool = False
    sort: str = "featured"

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "RentalsDirectoryFilter":
        return cls(
            search=(params.get("search") or "").strip(),
            department=(params.get("dept") or ALL).strip() or ALL,
            city=(params.get("city") or ALL).strip() or ALL,
            price=_choice(params, "price", PRICE_RANGES),
            type=(params.get("type") or ALL).strip() or ALL,
            featured_only=params.get("featured") == "true",
            sort=_choice(params, "sort", RENTALS_DIRECTORY_SORTS, default="featured"),
        )

    @property
    def is_active(self) -> bool:
        return (
            bool(self.search)
            or self.department != ALL
            or self.city != ALL
            or self.price != ALL
            or self.type != ALL
            or self.featured_only
        )

    def matches(self, place: Place) -> bool:
        city = place.city
        dept = city.department
        if self.search and not _text_matches(
            self.search, place.name, place.description, place.address, city.name, dept.name
        ):
            return False
        if self.department != ALL and dept.slug != self.department:
            return False
        if self.city != ALL and city.slug != self.city:
            return False
        if self.price != ALL and place.price_range != self.price:
            return False
        if self.type != ALL and place.kind != self.type:
            return False
        if self.featured_only and not place.is_featured:
            return False
        return True

    def apply(self, places: Iterable[Place]) -> list[Place]:
        found = [p for p in places if self.matches(p)]
        if self.sort == "name":
            return sorted(found, key=lambda p: p.name.casefold())
        if self.sort == "location":
            return sorted(found, key=lambda p: f"{p.city.department.name} - {p.city.name}".casefold())
        return _featured_first(found)

    def query_string(self) -> str:
        pairs = []
        if self.search:
            pairs.append(("search", self.search))
        if self.department != ALL:
            pairs.append(("dept", self.department))
        if self.city != ALL:
            pairs.append(("city", self.city))
        if self.price != ALL:
            pairs.append(("price", self.price))
        if self.type != ALL:
            pairs.append(("type", self.type))
        if self.featured_only:
            pairs.append(("featured", "true"))
        if self.sort != "featured":
            pairs.append(("sort", self.sort))
        return _query_string(pairs)
