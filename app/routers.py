import logging

from fastapi import APIRouter, FastAPI
from app.endpoints import customer

log = logging.getLogger("customers.http")

router = APIRouter()

router.include_router(customer.router)

def register_routers(app: FastAPI) -> None:
    app.include_router(router)
    log.info("routes registered: %d", len(router.routes))
