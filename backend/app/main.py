from fastapi import FastAPI

from backend.app.api.v1.router import router as v1_router
from backend.app.core.errors import register_error_handlers
from backend.app.core.logging_config import setup_logging, get_logger
from backend.app.db.base import Base
from backend.app.db.models import models_v1  # noqa: F401  (registers tables on Base.metadata)
from backend.app.db.session import engine

setup_logging()
log = get_logger(__name__)

app = FastAPI(title="Material Orders", version="0.1.0")
register_error_handlers(app)
app.include_router(v1_router, prefix="/v1")


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    log.info("Material order service started.")
