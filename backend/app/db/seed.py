from __future__ import annotations

from sqlalchemy import func, select

from backend.app.core.logging_config import get_logger, setup_logging
from backend.app.db.base import Base
from backend.app.db.models.models_v1 import MaterialOrder
from backend.app.db.session import SessionLocal, engine
from backend.app.db.store import MaterialOrderStore
from backend.app.schemas.material_order import MaterialOrderPayload
from backend.services.material_orders import create_material_order

log = get_logger(__name__)

DEMO_ORDER = {
    "materialId": "MAT-0001",
    "itemDescription": "Galvanised steel bolts M10",
    "supplier": "Pacific Fasteners",
    "quantity": 10,
    "unitOfMeasurement": "box",
    "unitPrice": 2.5,
    "totalPrice": 25.0,
    "orderDate": "2026-01-15",
    "items": [{"sku": "BOLT-M10-50", "count": 100}],
}


def run_seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        count = db.scalar(select(func.count()).select_from(MaterialOrder))
        if count:
            log.info(f"SEED SKIPPED: {count} material order(s) already present")
            return

        order = create_material_order(MaterialOrderStore(db), MaterialOrderPayload.model_validate(DEMO_ORDER))
        log.info(f"SEED OK: material order {order.id}")
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging()
    run_seed()
