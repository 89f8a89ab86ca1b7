"""
Read-side queries for the public pages.

Everything here only returns published records; a missing or unpublished
parent makes the whole lookup return None. Relationships the templates touch
are loaded eagerly because the session is async.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.business_plan import BusinessPlan
from app.models.city import City
from app.models.department import Department
from app.models.figure import Figure
from app.models.media import Media
from app.models.place import FEATURED_KINDS, Place

CITY_GALLERY_LIMIT = 12
HOME_FEATURED_LIMIT = 6
HOME_EVENTS_LIMIT = 4


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _listing_order():
    return (Place.is_featured.desc(), Place.created_at.desc())


@dataclass
class HomeContent:
    departments: list[Department] = field(default_factory=list)
    featured_places: list[Place] = field(default_factory=list)
    upcoming_events: list[Place] = field(default_factory=list)


@dataclass
class CityContent:
    department: Department
    city: City
    places: list[Place]
    figures: list[Figure]
    upcoming_events: list[Place]
    gallery: list[Media]

    def of_kind(self, kind: str) -> list[Place]:
        return [p for p in self.places if p.kind == kind]

    @property
    def unesco_count(self) -> int:
        return sum(1 for p in self.places if p.unesco_site)


async def list_departments(db: AsyncSession) -> list[Department]:
    stmt = select(Department).where(Department.is_published.is_(True)).order_by(Department.name.asc())
    return list((await db.execute(stmt)).scalars().all())


async def load_home(db: AsyncSession) -> HomeContent:
    departments = await list_departments(db)

    featured_stmt = (
        select(Place)
        .where(Place.is_published.is_(True), Place.kind.in_(FEATURED_KINDS))
        .options(selectinload(Place.city).selectinload(City.department))
        .order_by(Place.created_at.desc())
        .limit(HOME_FEATURED_LIMIT)
    )
    events_stmt = (
        select(Place)
        .where(Place.is_published.is_(True), Place.kind == "event", Place.event_date >= _now())
        .options(selectinload(Place.city).selectinload(City.department))
        .order_by(Place.event_date.asc())
        .limit(HOME_EVENTS_LIMIT)
    )
    return HomeContent(
        departments=departments,
        featured_places=list((await db.execute(featured_stmt)).scalars().all()),
        upcoming_events=list((await db.execute(events_stmt)).scalars().all()),
    )


async def get_department(db: AsyncSession, slug: str) -> Department | None:
    stmt = select(Department).where(Department.slug == slug)
    dept = (await db.execute(stmt)).scalar_one_or_none()
    if not dept or not dept.is_published:
        return None
    return dept


async def list_department_cities(db: AsyncSession, department_id: str) -> list[City]:
    stmt = (
        select(City)
        .where(City.department_id == department_id, City.is_published.is_(True))
        .order_by(City.name.asc())
    )
    return list((await db.execute(stmt)).scalars().all())


async def list_published_cities(db: AsyncSession) -> list[City]:
    stmt = (
        select(City)
        .join(Department, City.department_id == Department.id)
        .where(City.is_published.is_(True), Department.is_published.is_(True))
        .options(selectinload(City.department))
        .order_by(Department.name.asc(), City.name.asc())
    )
    return list((await db.execute(stmt)).scalars().all())


async def get_city(db: AsyncSession, dept_slug: str, city_slug: str) -> tuple[Department, City] | None:
    dept = await get_department(db, dept_slug)
    if not dept:
        return None
    stmt = select(City).where(
        City.slug == city_slug,
        City.department_id == dept.id,
        City.is_published.is_(True),
    )
    city = (await db.execute(stmt)).scalar_one_or_none()
    if not city:
        return None
    return dept, city


async def list_city_places(db: AsyncSession, city_id: str, kinds: tuple[str, ...] | None = None) -> list[Place]:
    stmt = select(Place).where(Place.city_id == city_id, Place.is_published.is_(True))
    if kinds:
        stmt = stmt.where(Place.kind.in_(kinds))
    stmt = stmt.order_by(*_listing_order())
    return list((await db.execute(stmt)).scalars().all())


async def load_city(db: AsyncSession, dept_slug: str, city_slug: str) -> CityContent | None:
    found = await get_city(db, dept_slug, city_slug)
    if not found:
        return None
    dept, city = found

    places = await list_city_places(db, city.id)

    figures_stmt = (
        select(Figure)
        .where(Figure.city_id == city.id, Figure.is_published.is_(True))
        .order_by(Figure.name.asc())
    )
    figures = list((await db.execute(figures_stmt)).scalars().all())

    now = _now()
    events = sorted(
        (p for p in places if p.kind == "event" and p.event_date and _aware(p.event_date) >= now),
        key=lambda p: _aware(p.event_date),
    )

    gallery_stmt = (
        select(Media)
        .join(Place, Media.place_id == Place.id)
        .where(Place.city_id == city.id, Place.is_published.is_(True))
        .order_by(Media.created_at.desc())
        .limit(CITY_GALLERY_LIMIT)
    )
    gallery = list((await db.execute(gallery_stmt)).scalars().all())

    return CityContent(
        department=dept,
        city=city,
        places=places,
        figures=figures,
        upcoming_events=events,
        gallery=gallery,
    )


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


async def get_city_place(
    db: AsyncSession, dept_slug: str, city_slug: str, place_slug: str, kinds: tuple[str, ...]
) -> tuple[Department, City, Place, list[Media]] | None:
    found = await get_city(db, dept_slug, city_slug)
    if not found:
        return None
    dept, city = found

    stmt = select(Place).where(
        Place.slug == place_slug,
        Place.city_id == city.id,
        Place.is_published.is_(True),
        Place.kind.in_(kinds),
    )
    place = (await db.execute(stmt)).scalar_one_or_none()
    if not place:
        return None

    return dept, city, place, await list_place_media(db, place.id)


async def get_published_place(db: AsyncSession, place_id: str, kinds: tuple[str, ...]) -> Place | None:
    stmt = select(Place).where(
        Place.id == place_id,
        Place.kind.in_(kinds),
        Place.is_published.is_(True),
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def list_place_media(db: AsyncSession, place_id: str) -> list[Media]:
    stmt = select(Media).where(Media.place_id == place_id).order_by(Media.created_at.desc())
    return list((await db.execute(stmt)).scalars().all())


async def list_directory_places(db: AsyncSession, kinds: tuple[str, ...]) -> list[Place]:
    stmt = (
        select(Place)
        .join(City, Place.city_id == City.id)
        .where(Place.is_published.is_(True), Place.kind.in_(kinds))
        .options(selectinload(Place.city).selectinload(City.department))
        .order_by(*_listing_order())
    )
    return list((await db.execute(stmt)).scalars().all())


async def get_figure(db: AsyncSession, figure_id: str) -> Figure | None:
    stmt = (
        select(Figure)
        .where(Figure.id == figure_id, Figure.is_published.is_(True))
        .options(selectinload(Figure.city).selectinload(City.department))
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def list_business_plans(db: AsyncSession) -> list[BusinessPlan]:
    stmt = select(BusinessPlan).order_by(BusinessPlan.price_month_cents.asc())
    return list((await db.execute(stmt)).scalars().all())
