from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Float, Index, Integer, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from car_catalog.infra.db.models.base import Base


class CarRow(Base):
    __tablename__ = "cars"
    __table_args__ = (Index("ix_cars_year", "year"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    make: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )  # $9,999,999,999.99

    horsepower: Mapped[int] = mapped_column(Integer, nullable=False)
    mpg: Mapped[float] = mapped_column(Float, nullable=False)

    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    data_ai_hint: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    features: Mapped[list[str]] = mapped_column(
        ARRAY(Text), nullable=False, default=list
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
