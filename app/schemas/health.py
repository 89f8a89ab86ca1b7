from datetime import datetime

from pydantic import BaseModel, Field


class DatabaseHealthOut(BaseModel):
    connected: bool
    timestamp: datetime
    status: str  # "healthy" | "unhealthy" | "error"
    error: str | None = None


class TableCount(BaseModel):
    table_name: str
    row_count: int


class TablesOut(BaseModel):
    tables: list[TableCount] = Field(default_factory=list)
    timestamp: datetime
