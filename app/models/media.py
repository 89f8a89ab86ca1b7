from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, id_column


class Media(CreatedAtMixin, Base):
    __tablename__ = "media"

    id: Mapped[str] = id_column("med")
    place_id: Mapped[str] = mapped_column(String, ForeignKey("places.id"), nullable=False, index=True)

    # public path, e.g. "/uploads/rentals/<place_id>/<millis>-<name>"
    path: Mapped[str] = mapped_column(String(500), nullable=False)
    alt: Mapped[str | None] = mapped_column(String(300), nullable=True)
    bucket: Mapped[str | None] = mapped_column(String(80), nullable=True)

    place: Mapped["Place"] = relationship(back_populates="media")  # noqa: F821
