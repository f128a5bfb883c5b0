"""HTTP API package."""

from fastapi import FastAPI

from zencafe.api.admin import router as admin_router
from zencafe.api.catalogue import router as catalogue_router
from zencafe.api.contact import router as contact_router
from zencafe.api.errors import register_error_handlers
from zencafe.api.notifications import router as notifications_router
from zencafe.api.orders import router as orders_router
from zencafe.api.session import dev_router, router as session_router

__all__ = ["include_routers", "register_error_handlers"]


def include_routers(app: FastAPI, dev_logins: bool = True) -> None:
    app.include_router(catalogue_router)
    app.include_router(orders_router)
    app.include_router(contact_router)
    app.include_router(notifications_router)
    app.include_router(admin_router)
    app.include_router(session_router)
    if dev_logins:
        app.include_router(dev_router)
