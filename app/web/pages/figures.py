import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.services.content import get_figure
from app.services.figures import parse_json_list
from app.services.retry import DB_ERRORS
from app.web.templating import render, render_db_error, render_not_found

log = logging.getLogger(__name__)
router = APIRouter()


@router.get("/figure/{figure_id}")
async def figure(request: Request, figure_id: str, db: AsyncSession = Depends(get_db)):
    try:
        row = await get_figure(db, figure_id)
    except DB_ERRORS:
        log.exception("figure page failed: id=%s", figure_id)
        return render_db_error(request)

    if not row:
        return render_not_found(request, "Historical figure")

    return render(request, "figure.html", {
        "figure": row,
        "city": row.city,
        "dept": row.city.department,
        "lived_addresses": parse_json_list(row.lived_addresses),
        "achievements": parse_json_list(row.achievements),
        "quotes": parse_json_list(row.quotes),
        "monuments": parse_json_list(row.monuments),
    })
