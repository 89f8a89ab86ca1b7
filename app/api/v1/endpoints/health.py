import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_db
from app.models.api_key import ApiKey
from app.models.business_plan import BusinessPlan
from app.models.city import City
from app.models.department import Department
from app.models.figure import Figure
from app.models.media import Media
from app.models.place import Place
from app.schemas.health import DatabaseHealthOut, TableCount, TablesOut

log = logging.getLogger(__name__)
router = APIRouter()

HEALTH_CHECK_TIMEOUT_SECONDS = 5.0

COUNTED_TABLES = (
    ("departments", Department),
    ("cities", City),
    ("places", Place),
    ("figures", Figure),
    ("media", Media),
    ("business_plans", BusinessPlan),
    ("api_keys", ApiKey),
)


async def check_database_connection(db: AsyncSession) -> bool:
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        log.exception("database connection check failed")
        return False
    return True


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/health/database", response_model=DatabaseHealthOut)
async def database_health(db: AsyncSession = Depends(get_db)):
    now = datetime.now(timezone.utc)
    try:
        connected = await asyncio.wait_for(check_database_connection(db), timeout=HEALTH_CHECK_TIMEOUT_SECONDS)
    except Exception as e:
        log.exception("database health check failed")
        message = "Database health check timed out" if isinstance(e, asyncio.TimeoutError) else str(e) or "Unknown error"
        body = DatabaseHealthOut(connected=False, timestamp=now, status="error", error=message)
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

    return DatabaseHealthOut(
        connected=connected,
        timestamp=now,
        status="healthy" if connected else "unhealthy",
    )


@router.get("/dev/tables", response_model=TablesOut)
async def dev_tables(db: AsyncSession = Depends(get_db)) -> TablesOut:
    if settings.env != "dev":
        raise HTTPException(status_code=403, detail="Not available in production")

    tables: list[TableCount] = []
    for name, model in COUNTED_TABLES:
        try:
            # a failed count must not abort the outer transaction
            async with db.begin_nested():
                count = (await db.execute(select(func.count()).select_from(model))).scalar_one()
        except SQLAlchemyError:
            # leave the table out, keep reporting the rest
            log.exception("row count failed for %s", name)
            continue
        tables.append(TableCount(table_name=name, row_count=count))

    return TablesOut(tables=tables, timestamp=datetime.now(timezone.utc))
