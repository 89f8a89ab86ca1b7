from sqlalchemy import Boolean, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, id_column


class Department(CreatedAtMixin, Base):
    __tablename__ = "departments"
    __table_args__ = (
        UniqueConstraint("slug", name="uq_department_slug"),
    )

    id: Mapped[str] = id_column("dpt")

    slug: Mapped[str] = mapped_column(String(120), nullable=False)  # e.g. "nord-ouest"
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    intro: Mapped[str | None] = mapped_column(Text, nullable=True)
    hero_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    cities: Mapped[list["City"]] = relationship(back_populates="department", order_by="City.name")  # noqa: F821
