import uuid
from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime


def gen_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def id_column(prefix: str):
    """String primary key such as 'plc_3f2a...'; the prefix tells record types apart in URLs and logs."""
    return mapped_column(String, primary_key=True, default=lambda: gen_id(prefix))


class Base(DeclarativeBase):
    pass

class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
