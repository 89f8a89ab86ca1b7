from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.services.content import HomeContent, list_business_plans, list_departments, load_home
from app.services.regions import REGIONS
from app.services.retry import safe_db_operation
from app.web.templating import render

router = APIRouter()


@router.get("/")
async def home(request: Request, db: AsyncSession = Depends(get_db)):
    content = await safe_db_operation(lambda: load_home(db), None)
    return render(request, "home.html", {
        "content": content or HomeContent(),
        "db_error": content is None,
    })


@router.get("/departments")
async def departments(request: Request, db: AsyncSession = Depends(get_db)):
    rows = await safe_db_operation(lambda: list_departments(db), None)
    return render(request, "departments.html", {
        "departments": rows or [],
        "db_error": rows is None,
    })


@router.get("/map")
async def haiti_map(request: Request):
    return render(request, "map.html", {"regions": REGIONS})


@router.get("/about")
async def about(request: Request, db: AsyncSession = Depends(get_db)):
    plans = await safe_db_operation(lambda: list_business_plans(db), [])
    return render(request, "about.html", {"plans": plans})
