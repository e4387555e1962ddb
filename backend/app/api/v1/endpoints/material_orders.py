from __future__ import annotations

from fastapi import APIRouter, Depends

from backend.app.api.deps import get_material_order_store
from backend.app.db.models.models_v1 import MaterialOrder
from backend.app.db.store import MaterialOrderStore
from backend.app.schemas.material_order import MaterialOrderPayload
from backend.services import material_orders as service

router = APIRouter(prefix="/material-orders")


def _order_out(o: MaterialOrder) -> dict:
    return {
        "id": o.id,
        "materialId": o.material_id,
        "itemDescription": o.item_description,
        "supplier": o.supplier,
        "quantity": o.quantity,
        "unitOfMeasurement": o.unit_of_measurement,
        "unitPrice": o.unit_price,
        "totalPrice": o.total_price,
        "orderDate": o.order_date,
        "items": o.items,
        "status": o.status,
        "createdAt": o.created_at,
        "updatedAt": o.updated_at,
    }


@router.post("", status_code=201)
@router.post("/", status_code=201)
def create_material_order(
    payload: MaterialOrderPayload,
    store: MaterialOrderStore = Depends(get_material_order_store),
):
    order = service.create_material_order(store, payload)
    return {"message": service.MSG_CREATED, "order": _order_out(order)}


# declared before /{order_id} so "allList" is not taken as an id
@router.get("/allList")
def list_material_orders(store: MaterialOrderStore = Depends(get_material_order_store)):
    return [_order_out(o) for o in service.list_material_orders(store)]


@router.get("/{order_id}")
def get_material_order(order_id: str, store: MaterialOrderStore = Depends(get_material_order_store)):
    return _order_out(service.get_material_order(store, order_id))


@router.put("/{order_id}")
def update_material_order(
    order_id: str,
    payload: MaterialOrderPayload,
    store: MaterialOrderStore = Depends(get_material_order_store),
):
    order = service.update_material_order(store, order_id, payload)
    return {"message": service.MSG_UPDATED, "order": _order_out(order)}


@router.delete("/{order_id}")
def delete_material_order(order_id: str, store: MaterialOrderStore = Depends(get_material_order_store)):
    service.delete_material_order(store, order_id)
    return {"message": service.MSG_DELETED}
