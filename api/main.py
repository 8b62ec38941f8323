import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config, db
from core.errors import DataAccessError
from core.middleware import request_id_middleware
from core.repository import build_repositories
from core.responses import register_exception_handlers
from existences import repository as existences_repository
from existences import router as existences_router
from invoice_details import repository as invoice_details_repository
from invoice_details import router as invoice_details_router
from menu_categories import repository as menu_categories_repository
from menu_categories import router as menu_categories_router
from menu_ingredients import repository as menu_ingredients_repository
from menu_ingredients import router as menu_ingredients_router
from menu_sub_categories import repository as menu_sub_categories_repository
from menu_sub_categories import router as menu_sub_categories_router
from menu_variants import repository as menu_variants_repository
from menu_variants import router as menu_variants_router
from purchase_invoices import repository as purchase_invoices_repository
from purchase_invoices import router as purchase_invoices_router
from service_settings import repository as settings_repository
from service_settings import router as settings_router
from stock_categories import repository as stock_categories_repository
from stock_categories import router as stock_categories_router
from stock_items import repository as stock_items_repository
from stock_items import router as stock_items_router
from stock_sub_categories import repository as stock_sub_categories_repository
from stock_sub_categories import router as stock_sub_categories_router
from stock_variants import repository as stock_variants_repository
from stock_variants import router as stock_variants_router
from suppliers import repository as suppliers_repository
from suppliers import router as suppliers_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

ENTITIES = [
    stock_categories_repository.ENTITY,
    stock_sub_categories_repository.ENTITY,
    stock_variants_repository.ENTITY,
    stock_items_repository.ENTITY,
    suppliers_repository.ENTITY,
    purchase_invoices_repository.ENTITY,
    invoice_details_repository.ENTITY,
    existences_repository.ENTITY,
    menu_categories_repository.ENTITY,
    menu_sub_categories_repository.ENTITY,
    menu_variants_repository.ENTITY,
    menu_ingredients_repository.ENTITY,
    settings_repository.ENTITY,
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the DB pool and the per-entity SQL once per process.
    await db.init_pool()
    try:
        app.state.repositories = build_repositories(ENTITIES, db.database())
        logger.info("repositories_ready entities=%s", ",".join(e.name for e in ENTITIES))
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Allow the local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(request_id_middleware)
register_exception_handlers(app)

app.include_router(stock_categories_router.router, prefix="/api/v1/stock/categories", tags=["stock"])
app.include_router(stock_sub_categories_router.router, prefix="/api/v1/stock/sub-categories", tags=["stock"])
app.include_router(stock_variants_router.router, prefix="/api/v1/stock/variants", tags=["stock"])
app.include_router(stock_items_router.router, prefix="/api/v1/stock/items", tags=["stock"])
app.include_router(suppliers_router.router, prefix="/api/v1/stock/suppliers", tags=["stock"])
app.include_router(purchase_invoices_router.router, prefix="/api/v1/invoices/purchases", tags=["invoices"])
app.include_router(invoice_details_router.router, prefix="/api/v1/invoices/details", tags=["invoices"])
app.include_router(existences_router.router, prefix="/api/v1/invoices/existences", tags=["invoices"])
app.include_router(menu_categories_router.router, prefix="/api/v1/menu/categories", tags=["menu"])
app.include_router(menu_sub_categories_router.router, prefix="/api/v1/menu/sub-categories", tags=["menu"])
app.include_router(menu_variants_router.router, prefix="/api/v1/menu/variants", tags=["menu"])
app.include_router(menu_ingredients_router.router, prefix="/api/v1/menu/ingredients", tags=["menu"])
app.include_router(settings_router.router, prefix="/api/v1/settings", tags=["settings"])


@app.get("/health")
async def health() -> dict:
    if not db.is_initialized():
        return {"status": "ok", "database": "uninitialized"}
    try:
        await db.database().fetch_val("SELECT 1")
    except DataAccessError:
        logger.exception("health_check_failed")
        return {"status": "ok", "database": "down"}
    return {"status": "ok", "database": "up"}


@app.get("/")
def root() -> dict:
    return {"message": "inventory crud api"}
