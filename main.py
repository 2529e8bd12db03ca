# main.py
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from typing import Optional
import logging

from app.api import routes_customers, routes_health
from app.core.config import Settings, settings as default_settings
from app.core.db import init_registry
from app.core.errors import CustomerServiceError

logging.basicConfig(level=default_settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None):
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)

    # one registry per app; handlers get it through Depends(get_registry)
    app.state.registry = init_registry(settings)

    @app.exception_handler(CustomerServiceError)
    async def customer_error_handler(request: Request, exc: CustomerServiceError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    app.include_router(routes_customers.router)
    app.include_router(routes_health.router, prefix="/api")

    logger.info("Application startup complete")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
