from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import DateTime

from app.models.base import Base, CreatedAtMixin, id_column


PLACE_KINDS = ("restaurant", "hotel", "landmark", "beach", "shop", "event", "tour", "activity")

DINING_KINDS = ("restaurant", "shop")
RENTAL_KINDS = ("hotel",)
# the country-wide rentals page also lists shops that rent rooms
RENTALS_DIRECTORY_KINDS = ("hotel", "shop")
FEATURED_KINDS = ("restaurant", "hotel", "landmark", "beach")


class Place(CreatedAtMixin, Base):
    __tablename__ = "places"
    __table_args__ = (
        UniqueConstraint("city_id", "slug", name="uq_place_slug_per_city"),
        CheckConstraint(
            "kind IN ('restaurant','hotel','landmark','beach','shop','event','tour','activity')",
            name="ck_place_kind",
        ),
    )

    id: Mapped[str] = id_column("plc")
    city_id: Mapped[str] = mapped_column(String, ForeignKey("cities.id"), nullable=False, index=True)

    # one of PLACE_KINDS
    kind: Mapped[str] = mapped_column(String(30), nullable=False)

    slug: Mapped[str] = mapped_column(String(160), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Contact / booking
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(60), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    booking_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    menu_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # "$" .. "$$$$"
    price_range: Mapped[str | None] = mapped_column(String(4), nullable=True)
    opening_hours: Mapped[str | None] = mapped_column(String(300), nullable=True)
    gps_coordinates: Mapped[str | None] = mapped_column(String(80), nullable=True)
    cover_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Visitor info, mostly landmarks
    entrance_fee: Mapped[str | None] = mapped_column(String(120), nullable=True)
    best_visiting_time: Mapped[str | None] = mapped_column(String(200), nullable=True)
    historical_significance: Mapped[str | None] = mapped_column(Text, nullable=True)
    accessibility: Mapped[str | None] = mapped_column(Text, nullable=True)
    guided_tours: Mapped[str | None] = mapped_column(Text, nullable=True)
    parking_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    directions_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    unesco_site: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # only for kind == "event"
    event_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    city: Mapped["City"] = relationship(back_populates="places")  # noqa: F821
    media: Mapped[list["Media"]] = relationship(back_populates="place")  # noqa: F821

    @property
    def price_level(self) -> int:
        return len(self.price_range or "")
