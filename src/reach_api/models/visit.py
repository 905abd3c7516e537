"""Visit model: persisted outreach visits (map pins)."""

from datetime import datetime

from sqlalchemy import DateTime, Double, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reach_api.models.base import Base, UUIDMixin


class Visit(Base, UUIDMixin):
    """A single residence visit dropped as a pin on the map.

    Enum columns hold the machine value as a plain string so that values
    written by older schemas still load through the enum fallback policy.
    """

    __tablename__ = "visits"

    latitude: Mapped[float] = mapped_column(Double, nullable=False)
    longitude: Mapped[float] = mapped_column(Double, nullable=False)
    residence_type: Mapped[str] = mapped_column(String(32), nullable=False)
    answer_status: Mapped[str] = mapped_column(String(32), nullable=False)
    response_type: Mapped[str] = mapped_column(String(32), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
