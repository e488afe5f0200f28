from __future__ import annotations
from decimal import Decimal
from typing import Dict, Iterable, Protocol
import logging

from storefront.schemas import Color, Product, Size

logger = logging.getLogger(__name__)

_LOREM = "Lorem ipsum dolor sit amet consect adipisicing elit lorem ipsum dolor sit."

# ---- Stub record (stands in for a catalog service) ----
STUB_PRODUCT = Product(
    id=1,
    name="Adidas CoreFit T-Shirt",
    short_description=_LOREM,
    description=" ".join([_LOREM] * 3),
    price=Decimal("59.90"),
    sizes=[Size.xs, Size.s, Size.m, Size.l, Size.xl],
    colors=[Color.gray, Color.purple, Color.green],
    images={
        Color.gray: "/products/1g.png",
        Color.purple: "/products/1p.png",
        Color.green: "/products/1gr.png",
    },
)

class ProductNotFound(LookupError):
    def __init__(self, product_id: str):
        super().__init__(f"product {product_id!r} not found")
        self.product_id = product_id

class Catalog(Protocol):
    def get(self, product_id: str) -> Product: ...

class StubCatalog:
    """Returns the same record whatever id is asked for."""
    def __init__(self, product: Product = STUB_PRODUCT):
        self.product = product

    def get(self, product_id: str) -> Product:
        return self.product

class InMemoryCatalog:
    """
    Catalog keyed by product id. Unknown or non-numeric ids raise
    ProductNotFound, which the app turns into a 404.
    """
    def __init__(self, products: Iterable[Product]):
        self.products: Dict[int, Product] = {}
        for p in products:
            if p.id in self.products:
                raise ValueError(f"duplicate product id {p.id}")
            self.products[p.id] = p
        logger.debug("catalog loaded with %d products", len(self.products))

    def get(self, product_id: str) -> Product:
        try:
            key = int(product_id)
        except (TypeError, ValueError):
            raise ProductNotFound(product_id) from None
        product = self.products.get(key)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def __len__(self) -> int:
        return len(self.products)

_default_catalog: Catalog = StubCatalog()

def get_catalog() -> Catalog:
    # FastAPI dependency; tests swap it via app.dependency_overrides
    return _default_catalog
