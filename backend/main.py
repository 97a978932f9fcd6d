import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.errors import InventoryError
from db.seed import reset_store
from routers.kpis import router as kpis_router
from routers.products import router as products_router
from routers.warehouses import router as warehouses_router
from schemas.products import ErrorItem, ErrorResponse

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("inventory")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = reset_store()
    logger.info("catalog seeded: %d products", len(store))
    yield


app = FastAPI(
    title="Inventory Query API",
    description="Products, warehouses, stock health and transfers (in-memory)",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Application errors are reported in the payload with a 200 status;
# clients inspect "errors", not the HTTP code.
def _error_response(message: str, code: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(errors=[ErrorItem(message=message, code=code, detail=detail)])
    exclude = {"errors": {"__all__": {"detail"}}} if detail is None else None
    return JSONResponse(status_code=200, content=body.model_dump(exclude=exclude))


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return _error_response(exc.message, exc.code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error_response("; ".join(parts) or "Invalid request", "BAD_USER_INPUT")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("%s %s crashed: %r\n%s", request.method, request.url.path, exc, traceback.format_exc())
    detail = repr(exc) if settings.is_development else None
    return _error_response("Internal server error", "INTERNAL_SERVER_ERROR", detail)


@app.get("/health")
async def health():
    return {"status": "ok"}


app.include_router(products_router, prefix="/products", tags=["products"])
app.include_router(warehouses_router, prefix="/warehouses", tags=["warehouses"])
app.include_router(kpis_router, prefix="/kpis", tags=["kpis"])

if __name__ == "__main__":
    logger.info("Inventory API running at http://%s:%d (docs at /docs)", settings.host, settings.port)
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.is_development)
