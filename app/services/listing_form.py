"""
Multi-step "list your property" form.

The page posts every field collected so far (earlier steps travel as hidden
inputs) together with an action. Each step checks its own required fields
before the form moves on. Submission is not persisted: it is logged and the
owner gets a confirmation page.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)

TOTAL_STEPS = 4

PROPERTY_TYPES = {
    "apartment": "Apartment",
    "house": "House",
    "villa": "Villa",
    "guesthouse": "Guesthouse",
    "hotel-room": "Hotel Room",
    "studio": "Studio",
}

AMENITY_OPTIONS = (
    "WiFi", "Air Conditioning", "Kitchen", "Parking", "Swimming Pool",
    "Ocean View", "Balcony", "Washer/Dryer", "TV", "Heating",
    "Workspace", "Gym", "Hot Tub", "Fireplace", "Garden",
)

LISTING_PLANS = ("standard", "premium")

REQUIRED_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("name", "property_type", "price_per_night"),
    2: ("address", "description"),
    3: (),
    4: ("email", "phone"),
}

FIELD_LABELS = {
    "name": "Property name",
    "property_type": "Property type",
    "price_per_night": "Price per night",
    "address": "Address",
    "description": "Description",
    "email": "Email",
    "phone": "Phone",
}


class PropertyListingDraft(BaseModel):
    name: str = ""
    property_type: str = "apartment"
    bedrooms: int = Field(default=1, ge=0)
    bathrooms: int = Field(default=1, ge=0)
    max_guests: int = Field(default=2, ge=1)
    price_per_night: str = ""

    address: str = ""
    description: str = ""

    amenities: list[str] = Field(default_factory=list)
    house_rules: str = ""

    email: str = ""
    phone: str = ""
    website: str = ""
    plan: str = "standard"


@dataclass
class ListingFormState:
    step: int = 1
    draft: PropertyListingDraft = field(default_factory=PropertyListingDraft)
    errors: list[str] = field(default_factory=list)
    submitted: bool = False


def _to_int(value: Any, default: int, minimum: int) -> int:
    try:
        return max(minimum, int(str(value).strip()))
    except (TypeError, ValueError):
        return default


def _clean(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def draft_from_form(form: Mapping[str, Any], amenities: list[str] | None = None) -> PropertyListingDraft:
    property_type = _clean(form.get("property_type")) or "apartment"
    plan = _clean(form.get("plan")) or "standard"
    return PropertyListingDraft(
        name=_clean(form.get("name")),
        property_type=property_type if property_type in PROPERTY_TYPES else "apartment",
        bedrooms=_to_int(form.get("bedrooms"), 1, 0),
        bathrooms=_to_int(form.get("bathrooms"), 1, 0),
        max_guests=_to_int(form.get("max_guests"), 2, 1),
        price_per_night=_clean(form.get("price_per_night")),
        address=_clean(form.get("address")),
        description=_clean(form.get("description")),
        # keep option order stable and drop anything not offered
        amenities=[a for a in AMENITY_OPTIONS if a in set(amenities or [])],
        house_rules=_clean(form.get("house_rules")),
        email=_clean(form.get("email")),
        phone=_clean(form.get("phone")),
        website=_clean(form.get("website")),
        plan=plan if plan in LISTING_PLANS else "standard",
    )


def step_errors(draft: PropertyListingDraft, step: int) -> list[str]:
    errors = [
        f"{FIELD_LABELS[name]} is required"
        for name in REQUIRED_FIELDS.get(step, ())
        if not getattr(draft, name)
    ]
    if step == 1 and draft.price_per_night:
        try:
            price = float(draft.price_per_night)
        except ValueError:
            price = math.nan
        if not math.isfinite(price):
            errors.append("Price per night must be a number")
        elif price <= 0:
            errors.append("Price per night must be greater than zero")
    if step == 4 and draft.email and "@" not in draft.email:
        errors.append("Email must be a valid address")
    return errors


def handle_action(step: int, draft: PropertyListingDraft, action: str) -> ListingFormState:
    step = max(1, min(TOTAL_STEPS, step))

    if action == "back":
        return ListingFormState(step=max(1, step - 1), draft=draft)

    if action == "restart":
        return ListingFormState()

    errors = step_errors(draft, step)
    if errors:
        return ListingFormState(step=step, draft=draft, errors=errors)

    if action == "submit" and step == TOTAL_STEPS:
        # every earlier step must still be complete; hidden fields can be tampered with
        for earlier in range(1, TOTAL_STEPS):
            missing = step_errors(draft, earlier)
            if missing:
                return ListingFormState(step=earlier, draft=draft, errors=missing)
        log.info(
            "property listing submitted: name=%r type=%s plan=%s email=%s",
            draft.name, draft.property_type, draft.plan, draft.email,
        )
        return ListingFormState(step=step, draft=draft, submitted=True)

    return ListingFormState(step=min(TOTAL_STEPS, step + 1), draft=draft)
