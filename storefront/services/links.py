from __future__ import annotations
from typing import List, Optional
from urllib.parse import quote, urlencode

from storefront.schemas import Color, Product, Selection, SelectorOption, Size

def build_url(product_id: str, selection: Selection, color: Optional[Color] = None, size: Optional[Size] = None) -> str:
    """
    Relative link back to the same page with one value swapped.
    Both params are always written, color first, so the other choice survives.
    """
    query = urlencode([
        ("color", (color or selection.color).value),
        ("size", (size or selection.size).value),
    ])
    return f"/products/{quote(str(product_id), safe='')}?{query}"

def size_options(product_id: str, product: Product, selection: Selection) -> List[SelectorOption]:
    return [
        SelectorOption(
            value=s.value,
            label=s.value.upper(),
            href=build_url(product_id, selection, size=s),
            selected=s == selection.size,
        )
        for s in product.sizes
    ]

def color_options(product_id: str, product: Product, selection: Selection) -> List[SelectorOption]:
    return [
        SelectorOption(
            value=c.value,
            label=c.value,
            href=build_url(product_id, selection, color=c),
            selected=c == selection.color,
            aria_label=f"Select {c.value}",
        )
        for c in product.colors
    ]
