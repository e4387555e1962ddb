from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from backend.app.db.session import SessionLocal
from backend.app.db.store import MaterialOrderStore

def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_material_order_store(db: Session = Depends(get_db)) -> MaterialOrderStore:
    return MaterialOrderStore(db)
