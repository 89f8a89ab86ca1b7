import logging
from datetime import date

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.models.place import DINING_KINDS, RENTAL_KINDS, RENTALS_DIRECTORY_KINDS
from app.services.booking import MAX_GUESTS, MIN_GUESTS, clamp_guests, min_check_out, nightly_rate, quote_stay
from app.services.content import (
    get_city,
    get_city_place,
    list_city_places,
    list_departments,
    list_directory_places,
    list_published_cities,
)
from app.services.filters import (
    PRICE_RANGES,
    RentalFilter,
    RentalsDirectoryFilter,
    RestaurantFilter,
    type_counts,
)
from app.services.retry import DB_ERRORS
from app.web.templating import render, render_db_error, render_not_found

log = logging.getLogger(__name__)
router = APIRouter()

LANDMARK_KINDS = ("landmark",)


def _parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _parse_int(raw: str | None) -> int | None:
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


async def _city_listing(db: AsyncSession, slug: str, city_slug: str, kinds: tuple[str, ...]):
    found = await get_city(db, slug, city_slug)
    if not found:
        return None
    dept, city = found
    return dept, city, await list_city_places(db, city.id, kinds)


async def _place_detail(request: Request, db: AsyncSession, template: str, what: str, kinds, slug, city_slug, place_slug, extra=None):
    try:
        found = await get_city_place(db, slug, city_slug, place_slug, kinds)
    except DB_ERRORS:
        log.exception("place page failed: dept=%s city=%s place=%s", slug, city_slug, place_slug)
        return render_db_error(request)

    if not found:
        return render_not_found(request, what)
    dept, city, place, gallery = found
    context = {"dept": dept, "city": city, "place": place, "gallery": gallery}
    if extra:
        context.update(extra(place))
    return render(request, template, context)


@router.get("/dept/{slug}/city/{city_slug}/restaurants")
async def restaurants(request: Request, slug: str, city_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        found = await _city_listing(db, slug, city_slug, DINING_KINDS)
    except DB_ERRORS:
        log.exception("listing page failed: dept=%s city=%s", slug, city_slug)
        return render_db_error(request)
    if not found:
        return render_not_found(request, "City")
    dept, city, places = found

    flt = RestaurantFilter.from_query(request.query_params)
    return render(request, "restaurants.html", {
        "dept": dept,
        "city": city,
        "filter": flt,
        "places": flt.apply(places),
        "total": len(places),
        "counts": type_counts(places),
        "price_ranges": PRICE_RANGES,
    })


@router.get("/dept/{slug}/city/{city_slug}/restaurants/{place_slug}")
async def restaurant(request: Request, slug: str, city_slug: str, place_slug: str, db: AsyncSession = Depends(get_db)):
    return await _place_detail(request, db, "place.html", "Restaurant", DINING_KINDS, slug, city_slug, place_slug)


@router.get("/dept/{slug}/city/{city_slug}/landmarks")
async def landmarks(request: Request, slug: str, city_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        found = await _city_listing(db, slug, city_slug, LANDMARK_KINDS)
    except DB_ERRORS:
        log.exception("listing page failed: dept=%s city=%s", slug, city_slug)
        return render_db_error(request)
    if not found:
        return render_not_found(request, "City")
    dept, city, places = found
    return render(request, "landmarks.html", {"dept": dept, "city": city, "places": places})


@router.get("/dept/{slug}/city/{city_slug}/landmarks/{place_slug}")
async def landmark(request: Request, slug: str, city_slug: str, place_slug: str, db: AsyncSession = Depends(get_db)):
    return await _place_detail(request, db, "place.html", "Landmark", LANDMARK_KINDS, slug, city_slug, place_slug)


@router.get("/dept/{slug}/city/{city_slug}/rentals")
async def city_rentals(request: Request, slug: str, city_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        found = await _city_listing(db, slug, city_slug, RENTAL_KINDS)
    except DB_ERRORS:
        log.exception("listing page failed: dept=%s city=%s", slug, city_slug)
        return render_db_error(request)
    if not found:
        return render_not_found(request, "City")
    dept, city, places = found

    flt = RentalFilter.from_query(request.query_params)
    return render(request, "city_rentals.html", {
        "dept": dept,
        "city": city,
        "filter": flt,
        "places": flt.apply(places),
        "total": len(places),
        "price_ranges": PRICE_RANGES,
    })


@router.get("/dept/{slug}/city/{city_slug}/rentals/{place_slug}")
async def rental(
    request: Request,
    slug: str,
    city_slug: str,
    place_slug: str,
    check_in: str | None = None,
    check_out: str | None = None,
    guests: str | None = None,
    request_booking: bool = False,
    db: AsyncSession = Depends(get_db),
):
    check_in_date = _parse_date(check_in)
    check_out_date = _parse_date(check_out)
    guest_count = clamp_guests(_parse_int(guests))

    def booking_context(place):
        quote = quote_stay(place.price_range, check_in_date, check_out_date)
        return {
            "nightly_rate": nightly_rate(place.price_range),
            "quote": quote,
            "check_in": check_in_date,
            "check_out": check_out_date,
            "guests": guest_count,
            "guest_options": range(MIN_GUESTS, MAX_GUESTS + 1),
            "today": date.today(),
            "min_check_out": min_check_out(check_in_date),
            # without an external booking link the owner gets a request instead
            "show_request": request_booking and quote is not None and not place.booking_url,
        }

    return await _place_detail(
        request, db, "rental.html", "Rental property", RENTAL_KINDS, slug, city_slug, place_slug, extra=booking_context,
    )


@router.get("/rentals")
async def rentals_directory(request: Request, db: AsyncSession = Depends(get_db)):
    try:
        places = await list_directory_places(db, RENTALS_DIRECTORY_KINDS)
        departments = await list_departments(db)
        cities = await list_published_cities(db)
    except DB_ERRORS:
        log.exception("rentals directory failed")
        return render(request, "rentals.html", {
            "db_error": True,
            "filter": RentalsDirectoryFilter(),
            "places": [],
            "total": 0,
            "departments": [],
            "cities": [],
            "price_ranges": PRICE_RANGES,
        })

    flt = RentalsDirectoryFilter.from_query(request.query_params)
    return render(request, "rentals.html", {
        "db_error": False,
        "filter": flt,
        "places": flt.apply(places),
        "total": len(places),
        "departments": departments,
        # only offer cities of the chosen department
        "cities": [c for c in cities if flt.department in ("all", c.department.slug)],
        "price_ranges": PRICE_RANGES,
    })
