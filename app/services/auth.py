import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.security import key_prefix, verify_api_key
from app.models.api_key import ApiKey
from app.services.retry import DB_ERRORS

log = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


@dataclass(frozen=True)
class Actor:
    """Contributor behind an upload request."""

    api_key_id: str
    email: str


async def get_actor(
    api_key: str | None = Security(api_key_header),
    db: AsyncSession = Depends(get_db),
) -> Actor:
    prefix = key_prefix(api_key) if api_key else None
    if not prefix:
        raise HTTPException(status_code=401, detail="Unauthorized")

    stmt = select(ApiKey).where(ApiKey.key_prefix == prefix, ApiKey.is_active.is_(True))
    try:
        rows = (await db.execute(stmt)).scalars().all()
    except DB_ERRORS:
        log.exception("api key lookup failed for prefix %s", prefix)
        raise HTTPException(status_code=500, detail="Authentication unavailable")

    for row in rows:
        if verify_api_key(api_key, row.key_hash):
            return Actor(api_key_id=row.id, email=row.owner_email)

    log.info("rejected api key with prefix %s", prefix)
    raise HTTPException(status_code=401, detail="Unauthorized")
