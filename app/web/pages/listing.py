import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.services.content import get_city
from app.services.listing_form import (
    AMENITY_OPTIONS,
    LISTING_PLANS,
    PROPERTY_TYPES,
    TOTAL_STEPS,
    ListingFormState,
    draft_from_form,
    handle_action,
)
from app.services.retry import DB_ERRORS
from app.web.templating import render, render_db_error, render_not_found

log = logging.getLogger(__name__)
router = APIRouter()


def _render_form(request: Request, state: ListingFormState, city=None, dept=None):
    return render(request, "list_property.html", {
        "state": state,
        "draft": state.draft,
        "total_steps": TOTAL_STEPS,
        "property_types": PROPERTY_TYPES,
        "amenity_options": AMENITY_OPTIONS,
        "plans": LISTING_PLANS,
        "city": city,
        "dept": dept,
    }, status_code=422 if state.errors else 200)


async def _advance(request: Request) -> ListingFormState:
    form = await request.form()
    draft = draft_from_form(form, form.getlist("amenities"))
    try:
        step = int(form.get("step") or 1)
    except ValueError:
        step = 1
    return handle_action(step, draft, str(form.get("action") or "next"))


@router.get("/rentals/list-property")
async def list_property(request: Request):
    return _render_form(request, ListingFormState())


@router.post("/rentals/list-property")
async def list_property_submit(request: Request):
    return _render_form(request, await _advance(request))


async def _city_or_none(db: AsyncSession, slug: str, city_slug: str):
    found = await get_city(db, slug, city_slug)
    return found or (None, None)


@router.get("/dept/{slug}/city/{city_slug}/rentals/list-property")
async def list_city_property(request: Request, slug: str, city_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        dept, city = await _city_or_none(db, slug, city_slug)
    except DB_ERRORS:
        log.exception("listing form failed: dept=%s city=%s", slug, city_slug)
        return render_db_error(request)
    if not city:
        return render_not_found(request, "City")
    return _render_form(request, ListingFormState(), city=city, dept=dept)


@router.post("/dept/{slug}/city/{city_slug}/rentals/list-property")
async def list_city_property_submit(request: Request, slug: str, city_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        dept, city = await _city_or_none(db, slug, city_slug)
    except DB_ERRORS:
        log.exception("listing form failed: dept=%s city=%s", slug, city_slug)
        return render_db_error(request)
    if not city:
        return render_not_found(request, "City")
    return _render_form(request, await _advance(request), city=city, dept=dept)
