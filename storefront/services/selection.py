from __future__ import annotations
from typing import Optional, Sequence

from storefront.schemas import Product, Selection

def _pick(value: Optional[str], allowed: Sequence):
    # exact match against the declared values, else the first one
    if value:
        for option in allowed:
            if option.value == value:
                return option
    return allowed[0]

def resolve_selection(product: Product, color: Optional[str] = None, size: Optional[str] = None) -> Selection:
    """
    Turn raw query values into a valid (color, size) pair for this product.
    Missing or unknown values fall back to the first declared option; nothing
    is raised or reported.
    """
    return Selection(color=_pick(color, product.colors), size=_pick(size, product.sizes))

def image_for(product: Product, selection: Selection) -> str:
    return product.images[selection.color]
