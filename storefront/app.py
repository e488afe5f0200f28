from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from storefront.config import APP_TITLE, LOG_LEVEL, PUBLIC_DIR, TEMPLATES_DIR, cors_origins
from storefront.services.catalog import Catalog, ProductNotFound, get_catalog
from storefront.services.page import build_product_page

logger = logging.getLogger("uvicorn.error")
logging.getLogger("storefront").setLevel(LOG_LEVEL)

# Pages read query params on every request, never cache them
NO_STORE = {"Cache-Control": "no-store"}
PAGE_META = {"title": "Product", "description": "Product details page"}

app = FastAPI(title=APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(), allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

def get_public_dir() -> Path:
    return PUBLIC_DIR

def public_asset(public_dir: Path, name: str) -> Optional[Path]:
    """File under <public>/products/ with this name, if there is one."""
    root = (public_dir / "products").resolve()
    candidate = (root / name).resolve()
    if candidate.parent != root or not candidate.is_file():
        return None
    return candidate

def single_query_value(request: Request, key: str) -> Optional[str]:
    # a repeated key is treated like a bad value, not "last one wins"
    values = request.query_params.getlist(key)
    return values[0] if len(values) == 1 else None

@app.exception_handler(ProductNotFound)
async def product_not_found(request: Request, exc: ProductNotFound):
    logger.warning("product lookup failed: %s", exc.product_id)
    return templates.TemplateResponse(
        request, "not_found.html",
        {**PAGE_META, "title": "Not found", "product_id": exc.product_id},
        status_code=404, headers=NO_STORE,
    )

@app.get("/healthz")
def healthz():
    return {"ok": True}

@app.get("/products/{product_id}", response_class=HTMLResponse)
def product_detail(
    request: Request,
    product_id: str,
    catalog: Catalog = Depends(get_catalog),
    public_dir: Path = Depends(get_public_dir),
):
    # /products/1g.png etc. share this path with the page; real files win
    asset = public_asset(public_dir, product_id)
    if asset is not None:
        return FileResponse(asset)

    product = catalog.get(product_id)
    page = build_product_page(
        product_id, product,
        color=single_query_value(request, "color"),
        size=single_query_value(request, "size"),
    )
    return templates.TemplateResponse(
        request, "product.html", {**PAGE_META, "page": page}, headers=NO_STORE
    )

# Everything else under the public dir (/klarna.png, ...); mounted last
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=str(PUBLIC_DIR)), name="public")
    logger.info("serving static files from %s", PUBLIC_DIR)
else:
    logger.info("no public dir at %s, static files disabled", PUBLIC_DIR)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
