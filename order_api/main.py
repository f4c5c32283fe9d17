# order_api/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

from order_api.api import ROUTERS
from order_api.data.database import init_db
from order_api.domain.errors import ServiceError, InternalError
from order_api.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database...")
    init_db()
    logger.info("Database ready")
    yield


async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Unhandled store error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": InternalError.detail})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Order Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

    for router in ROUTERS:
        app.include_router(router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8080)
