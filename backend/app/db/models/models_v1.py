from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import (
    String,
    DateTime,
    Float,
    Text,
    JSON,
    Index,
)
from sqlalchemy.orm import Mapped, mapped_column

from backend.app.db.base import Base
from backend.app.db.models.core_types import MaterialOrderStatus


def new_order_id() -> str:
    return uuid.uuid4().hex


# ---------- PROCUREMENT ----------
class MaterialOrder(Base):
    __tablename__ = "material_orders"
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_order_id)

    material_id: Mapped[str] = mapped_column(String, nullable=False)
    item_description: Mapped[str] = mapped_column(Text, nullable=False)
    supplier: Mapped[str] = mapped_column(String, nullable=False)

    # double precision, compared with float equality against the rounded product
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit_of_measurement: Mapped[str] = mapped_column(String, nullable=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)

    order_date: Mapped[str] = mapped_column(String, nullable=False)
    items: Mapped[Any | None] = mapped_column(JSON)
    status: Mapped[str] = mapped_column(String, default=MaterialOrderStatus.pending.value, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    __table_args__ = (Index("ix_material_orders_created_at", "created_at"),)
