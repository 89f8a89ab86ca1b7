from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, id_column


class Figure(CreatedAtMixin, Base):
    __tablename__ = "figures"
    __table_args__ = (
        UniqueConstraint("city_id", "slug", name="uq_figure_slug_per_city"),
    )

    id: Mapped[str] = id_column("fig")
    city_id: Mapped[str] = mapped_column(String, ForeignKey("cities.id"), nullable=False, index=True)

    slug: Mapped[str] = mapped_column(String(160), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    category: Mapped[str | None] = mapped_column(String(120), nullable=True)
    occupation: Mapped[str | None] = mapped_column(String(200), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    birth_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    death_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    birth_place: Mapped[str | None] = mapped_column(String(300), nullable=True)
    death_place: Mapped[str | None] = mapped_column(String(300), nullable=True)

    legacy: Mapped[str | None] = mapped_column(Text, nullable=True)
    famous_works: Mapped[str | None] = mapped_column(Text, nullable=True)
    contemporaries: Mapped[str | None] = mapped_column(Text, nullable=True)
    movements: Mapped[str | None] = mapped_column(Text, nullable=True)

    # serialized JSON arrays of strings
    quotes: Mapped[str | None] = mapped_column(Text, nullable=True)
    achievements: Mapped[str | None] = mapped_column(Text, nullable=True)
    monuments: Mapped[str | None] = mapped_column(Text, nullable=True)
    lived_addresses: Mapped[str | None] = mapped_column(Text, nullable=True)

    portrait_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    city: Mapped["City"] = relationship(back_populates="figures")  # noqa: F821
