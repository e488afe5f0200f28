from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from storefront.config import CURRENCY_SYMBOL
from storefront.schemas import PaymentMethod, Product, ProductPage
from storefront.services.links import color_options, size_options
from storefront.services.selection import image_for, resolve_selection

# Decorative only, nothing is charged from this page
PAYMENT_METHODS: List[PaymentMethod] = [
    PaymentMethod(src="/klarna.png", alt="klarna"),
    PaymentMethod(src="/cards.png", alt="cards"),
    PaymentMethod(src="/stripe.png", alt="stripe"),
]

_CENTS = Decimal("0.01")

def format_price(amount: Union[Decimal, float, int], symbol: str = CURRENCY_SYMBOL) -> str:
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return f"{symbol}{value.quantize(_CENTS, rounding=ROUND_HALF_UP)}"

def build_product_page(product_id: str, product: Product, color: Optional[str] = None, size: Optional[str] = None) -> ProductPage:
    """
    Everything the detail template needs, derived in one pass:
      1) resolve color/size against the product's declared options
      2) pick the image for the selected color
      3) build selector links that keep the other choice
      4) format the price
    """
    selection = resolve_selection(product, color=color, size=size)
    return ProductPage(
        product=product,
        selection=selection,
        image_src=image_for(product, selection),
        image_alt=f"{product.name} - {selection.color.value}",
        price_text=format_price(product.price),
        size_options=size_options(product_id, product, selection),
        color_options=color_options(product_id, product, selection),
        payment_methods=PAYMENT_METHODS,
    )
