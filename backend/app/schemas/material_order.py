from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class MaterialOrderPayload(BaseModel):
    """
    Body of create and update requests.

    Every field is optional here: presence rules differ between create (all
    required) and update (any subset), and the numeric fields keep their raw
    JSON value so the service can report unparseable numbers itself.
    Attribute names match the ``MaterialOrder`` columns; JSON uses camelCase.
    """

    material_id: str | None = Field(default=None, alias="materialId")
    item_description: str | None = Field(default=None, alias="itemDescription")
    supplier: str | None = None
    quantity: Any = None
    unit_of_measurement: str | None = Field(default=None, alias="unitOfMeasurement")
    unit_price: Any = Field(default=None, alias="unitPrice")
    total_price: Any = Field(default=None, alias="totalPrice")
    order_date: str | None = Field(default=None, alias="orderDate")
    items: Any = None
    status: str | None = None
