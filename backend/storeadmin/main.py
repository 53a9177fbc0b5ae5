from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storeadmin.api.health import router as health_router
from storeadmin.api.routes_products import router as products_router
from storeadmin.api.routes_stores import router as stores_router
from storeadmin.config import settings
from storeadmin.db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup; RESET_DB=1 drops and recreates the schema
    init_db()
    yield


app = FastAPI(title="Store Admin - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(stores_router, tags=["stores"])

app.include_router(products_router, tags=["products"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
