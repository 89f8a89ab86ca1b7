from sqlalchemy import Boolean, Float, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, id_column


class City(CreatedAtMixin, Base):
    __tablename__ = "cities"
    __table_args__ = (
        UniqueConstraint("department_id", "slug", name="uq_city_slug_per_department"),
    )

    id: Mapped[str] = id_column("cty")
    department_id: Mapped[str] = mapped_column(String, ForeignKey("departments.id"), nullable=False, index=True)

    slug: Mapped[str] = mapped_column(String(120), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    hero_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    lng: Mapped[float | None] = mapped_column(Float, nullable=True)

    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    department: Mapped["Department"] = relationship(back_populates="cities")  # noqa: F821
    places: Mapped[list["Place"]] = relationship(back_populates="city")  # noqa: F821
    figures: Mapped[list["Figure"]] = relationship(back_populates="city")  # noqa: F821
