import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import engine
from app.error_handlers import register_error_handlers
from app.middleware import TimingMiddleware
from app.routers import inventories, products

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting product service (env=%s)", settings.APP_ENV)
    yield
    # Release pooled connections on shutdown.
    await engine.dispose()


app = FastAPI(
    title="Product Service",
    description="CRUD API for products with a JSON:API style response envelope",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(products.router)
app.include_router(inventories.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
