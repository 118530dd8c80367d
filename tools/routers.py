import logging

from fastapi import FastAPI

logger = logging.getLogger(__name__)


def gather_routers(app: FastAPI, routers: list) -> FastAPI:
    for router in routers:
        app.include_router(router)
        logger.debug(f"Included router with {len(router.routes)} route(s)")
    return app
