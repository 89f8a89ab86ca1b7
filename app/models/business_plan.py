from sqlalchemy import JSON, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, id_column


class BusinessPlan(Base):
    __tablename__ = "business_plans"
    __table_args__ = (
        UniqueConstraint("code", name="uq_business_plan_code"),
    )

    id: Mapped[str] = id_column("pln")
    code: Mapped[str] = mapped_column(String(40), nullable=False)  # "starter" | "growth" | "premium"
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    price_month_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    features: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    @property
    def price_month(self) -> str:
        return f"${self.price_month_cents / 100:.2f}"
