import logging
from itertools import groupby

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.services.content import get_department, list_department_cities, list_published_cities, load_city
from app.services.regions import search_regions, slugify
from app.services.retry import DB_ERRORS, safe_db_operation
from app.web.templating import render, render_db_error, render_not_found

log = logging.getLogger(__name__)
router = APIRouter()


@router.get("/cities")
async def cities(request: Request, q: str = "", db: AsyncSession = Depends(get_db)):
    rows = await safe_db_operation(lambda: list_published_cities(db), None)
    needle = slugify(q)

    groups = []
    if rows:
        matching = [
            c for c in rows
            if not needle or needle in slugify(c.name) or needle in slugify(c.department.name)
        ]
        # rows are ordered by department name, so groupby sees each department once
        for _, items in groupby(matching, key=lambda c: c.department_id):
            items = list(items)
            groups.append((items[0].department, items))

    return render(request, "cities.html", {
        "q": q,
        "groups": groups,
        "db_error": rows is None,
        # static overview when the directory is unavailable or not seeded yet
        "regions": search_regions(q) if not rows else [],
    })


@router.get("/dept/{slug}")
async def department(request: Request, slug: str, db: AsyncSession = Depends(get_db)):
    try:
        dept = await get_department(db, slug)
        city_rows = await list_department_cities(db, dept.id) if dept else []
    except DB_ERRORS:
        log.exception("department page failed: slug=%s", slug)
        return render_db_error(request)

    if not dept:
        return render_not_found(request, "Department")
    return render(request, "department.html", {"dept": dept, "cities": city_rows})


@router.get("/dept/{slug}/city/{city_slug}")
async def city(request: Request, slug: str, city_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        content = await load_city(db, slug, city_slug)
    except DB_ERRORS:
        log.exception("city page failed: dept=%s city=%s", slug, city_slug)
        return render_db_error(request)

    if not content:
        return render_not_found(request, "City")
    return render(request, "city.html", {"c": content, "dept": content.department, "city": content.city})
