"""
Material order service.

Request validation and arithmetic rules for material orders, plus the
five operations exposed over HTTP. Persistence goes through
``MaterialOrderStore``; its result kinds are mapped here onto the error
taxonomy of ``backend.app.core.errors``.

Total price rule:
    total_price == round(quantity * unit_price, 2)

The product is taken in binary floating point, rounded half away from zero
on its exact value, then compared with float equality.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from backend.app.core.errors import NotFoundError, StorageError, ValidationError
from backend.app.core.logging_config import get_logger
from backend.app.db.models.core_types import MaterialOrderStatus
from backend.app.db.models.models_v1 import MaterialOrder
from backend.app.db.store import MaterialOrderStore, StoreErrorKind, StoreResult
from backend.app.schemas.material_order import MaterialOrderPayload

log = get_logger(__name__)

REQUIRED_FIELDS = (
    "material_id",
    "item_description",
    "supplier",
    "quantity",
    "unit_of_measurement",
    "unit_price",
    "total_price",
    "order_date",
)
NUMERIC_FIELDS = ("quantity", "unit_price", "total_price")

CENTS = Decimal("0.01")

MSG_REQUIRED = "All fields are required."
MSG_INVALID_NUMBERS = "Quantity, Unit Price, and Total Price must be valid numbers."
MSG_TOTAL_MISMATCH = "Error in Total Price: Your total price is incorrect"
MSG_ORDER_NOT_FOUND = "Material order not found"
MSG_REQUEST_NOT_FOUND = "Material request not found"
MSG_SERVER_RETRY = "Server error. Please try again later."
MSG_SERVER = "Server error"

MSG_CREATED = "Material Request created successfully"
MSG_UPDATED = "Material request updated successfully"
MSG_DELETED = "Material order deleted successfully"


# ---------- Rules ----------
def parse_amount(raw: Any) -> float | None:
    """
    Parse a JSON number or numeric string. Returns None when the value is
    not a finite number (booleans, containers, "abc", "NaN", "Infinity").
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        # "1_000" is Python literal syntax, not a decimal number
        if "_" in raw:
            return None
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def expected_total(quantity: float, unit_price: float) -> float:
    product = quantity * unit_price
    # non-finite and >= 1e21 products are compared unrounded
    if not math.isfinite(product) or abs(product) >= 1e21:
        return product
    return float(Decimal(product).quantize(CENTS, rounding=ROUND_HALF_UP))


def check_total(quantity: float, unit_price: float, total_price: float) -> None:
    if expected_total(quantity, unit_price) != total_price:
        log.warning(
            f"Total price rejected: {quantity} x {unit_price} = "
            f"{expected_total(quantity, unit_price)}, got {total_price}"
        )
        raise ValidationError(MSG_TOTAL_MISMATCH)


def _parse_numeric_fields(fields: dict[str, Any]) -> None:
    for name in NUMERIC_FIELDS:
        if name not in fields:
            continue
        parsed = parse_amount(fields[name])
        if parsed is None:
            log.warning(f"Rejected non-numeric {name}: {fields[name]!r}")
            raise ValidationError(MSG_INVALID_NUMBERS)
        fields[name] = parsed


def validate_new_order(payload: MaterialOrderPayload) -> dict[str, Any]:
    """Return the column values of a new order, or raise ValidationError."""
    fields = payload.model_dump()

    # 0, "" and false count as missing, like an absent field
    if any(not fields[name] for name in REQUIRED_FIELDS):
        raise ValidationError(MSG_REQUIRED)

    _parse_numeric_fields(fields)
    check_total(fields["quantity"], fields["unit_price"], fields["total_price"])

    fields["status"] = fields["status"] or MaterialOrderStatus.pending.value
    return fields


def validate_order_changes(payload: MaterialOrderPayload) -> dict[str, Any]:
    """
    Return the columns to merge into a stored order. Fields absent from the
    request (or sent as null) are left out. The total is rechecked only when
    quantity, unit price and total price arrive together; a request that
    omits the total does not re-derive it.
    """
    changes = payload.model_dump(exclude_none=True)
    _parse_numeric_fields(changes)

    if all(name in changes for name in NUMERIC_FIELDS):
        check_total(changes["quantity"], changes["unit_price"], changes["total_price"])

    return changes


def _unwrap(result: StoreResult, *, action: str, not_found: str | None = None, server_message: str):
    if result.ok:
        return result.value
    if result.error == StoreErrorKind.not_found and not_found is not None:
        raise NotFoundError(not_found)
    log.error(f"Error {action}: {result.detail}")
    raise StorageError(server_message, detail=result.detail)


# ---------- Operations ----------
def create_material_order(store: MaterialOrderStore, payload: MaterialOrderPayload) -> MaterialOrder:
    fields = validate_new_order(payload)
    order = _unwrap(store.create(fields), action="creating material order", server_message=MSG_SERVER_RETRY)
    log.info(f"[MaterialOrder: {order.id}] created for material {order.material_id}")
    return order


def list_material_orders(store: MaterialOrderStore) -> list[MaterialOrder]:
    return _unwrap(store.find_all(), action="fetching material orders", server_message=MSG_SERVER)


def get_material_order(store: MaterialOrderStore, order_id: str) -> MaterialOrder:
    return _unwrap(
        store.find_by_id(order_id),
        action="fetching material order",
        not_found=MSG_ORDER_NOT_FOUND,
        server_message=MSG_SERVER,
    )


def update_material_order(store: MaterialOrderStore, order_id: str, payload: MaterialOrderPayload) -> MaterialOrder:
    changes = validate_order_changes(payload)
    order = _unwrap(
        store.find_by_id_and_update(order_id, changes),
        action="updating material order",
        not_found=MSG_REQUEST_NOT_FOUND,
        server_message=MSG_SERVER_RETRY,
    )
    log.info(f"[MaterialOrder: {order_id}] updated fields {sorted(changes)}")
    return order


def delete_material_order(store: MaterialOrderStore, order_id: str) -> None:
    _unwrap(
        store.find_by_id_and_delete(order_id),
        action="deleting material order",
        not_found=MSG_ORDER_NOT_FOUND,
        server_message=MSG_SERVER,
    )
    log.info(f"[MaterialOrder: {order_id}] deleted")
