import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.security import generate_api_key
from app.models.api_key import ApiKey
from app.models.city import City
from app.models.department import Department
from app.models.place import Place
from app.schemas.content_admin import (
    ApiKeyCreate,
    ApiKeyIssuedOut,
    CityOut,
    CityUpsert,
    DepartmentOut,
    DepartmentUpsert,
    PlaceOut,
    PlaceUpsert,
    PublishToggle,
)
from app.services.internal_admin import require_internal_admin
from app.services.regions import slugify

log = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", dependencies=[Depends(require_internal_admin)])


def _normalize_slug(raw: str) -> str:
    slug = slugify(raw)
    if not slug:
        raise HTTPException(status_code=422, detail="Slug must contain letters or digits")
    return slug


async def _commit_or_409(db: AsyncSession, what: str) -> None:
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        log.exception("%s upsert failed: integrity error", what)
        raise HTTPException(status_code=409, detail="Constraint violation")


def _department_out(d: Department) -> DepartmentOut:
    return DepartmentOut(
        id=d.id, slug=d.slug, name=d.name, intro=d.intro, hero_url=d.hero_url, is_published=d.is_published,
    )


def _city_out(c: City) -> CityOut:
    return CityOut(
        id=c.id,
        department_id=c.department_id,
        slug=c.slug,
        name=c.name,
        summary=c.summary,
        lat=c.lat,
        lng=c.lng,
        is_published=c.is_published,
    )


def _place_out(p: Place) -> PlaceOut:
    return PlaceOut(
        id=p.id,
        city_id=p.city_id,
        kind=p.kind,
        slug=p.slug,
        name=p.name,
        price_range=p.price_range,
        is_featured=p.is_featured,
        is_published=p.is_published,
    )


@router.post("/api-keys", response_model=ApiKeyIssuedOut)
async def issue_api_key(body: ApiKeyCreate, db: AsyncSession = Depends(get_db)) -> ApiKeyIssuedOut:
    key = generate_api_key()
    row = ApiKey(
        owner_email=body.owner_email.strip().lower(),
        key_prefix=key.prefix,
        key_hash=key.hashed,
        is_active=True,
    )
    db.add(row)
    await _commit_or_409(db, "api key")
    log.info("api key issued: id=%s prefix=%s", row.id, row.key_prefix)
    return ApiKeyIssuedOut(id=row.id, owner_email=row.owner_email, api_key=key.plain)


@router.put("/departments/{slug}", response_model=DepartmentOut)
async def upsert_department(slug: str, body: DepartmentUpsert, db: AsyncSession = Depends(get_db)) -> DepartmentOut:
    slug_norm = _normalize_slug(slug)
    dept = (await db.execute(select(Department).where(Department.slug == slug_norm))).scalar_one_or_none()
    if dept is None:
        dept = Department(slug=slug_norm)
        db.add(dept)

    dept.name = body.name
    dept.intro = body.intro
    dept.hero_url = body.hero_url
    dept.is_published = body.is_published

    await _commit_or_409(db, "department")
    return _department_out(dept)


@router.put("/departments/{slug}/cities/{city_slug}", response_model=CityOut)
async def upsert_city(slug: str, city_slug: str, body: CityUpsert, db: AsyncSession = Depends(get_db)) -> CityOut:
    dept = (await db.execute(select(Department).where(Department.slug == slug.lower().strip()))).scalar_one_or_none()
    if not dept:
        raise HTTPException(status_code=404, detail="Department not found")

    city_slug_norm = _normalize_slug(city_slug)
    city = (await db.execute(select(City).where(
        City.department_id == dept.id,
        City.slug == city_slug_norm,
    ))).scalar_one_or_none()
    if city is None:
        city = City(department_id=dept.id, slug=city_slug_norm)
        db.add(city)

    for field_name, value in body.model_dump().items():
        setattr(city, field_name, value)

    await _commit_or_409(db, "city")
    return _city_out(city)


@router.put("/cities/{city_id}/places/{place_slug}", response_model=PlaceOut)
async def upsert_place(city_id: str, place_slug: str, body: PlaceUpsert, db: AsyncSession = Depends(get_db)) -> PlaceOut:
    city = (await db.execute(select(City).where(City.id == city_id))).scalar_one_or_none()
    if not city:
        raise HTTPException(status_code=404, detail="City not found")
    if body.kind != "event" and body.event_date is not None:
        raise HTTPException(status_code=422, detail="event_date is only allowed for events")

    place_slug_norm = _normalize_slug(place_slug)
    place = (await db.execute(select(Place).where(
        Place.city_id == city.id,
        Place.slug == place_slug_norm,
    ))).scalar_one_or_none()
    if place is None:
        place = Place(city_id=city.id, slug=place_slug_norm)
        db.add(place)

    for field_name, value in body.model_dump().items():
        setattr(place, field_name, value)

    await _commit_or_409(db, "place")
    return _place_out(place)


@router.patch("/places/{place_id}/publish", response_model=PlaceOut)
async def set_place_published(place_id: str, body: PublishToggle, db: AsyncSession = Depends(get_db)) -> PlaceOut:
    place = (await db.execute(select(Place).where(Place.id == place_id))).scalar_one_or_none()
    if not place:
        raise HTTPException(status_code=404, detail="Place not found")

    place.is_published = body.is_published
    await _commit_or_409(db, "place")
    return _place_out(place)
