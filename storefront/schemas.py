from __future__ import annotations
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

class Color(str, Enum):
    gray = "gray"
    purple = "purple"
    green = "green"

class Size(str, Enum):
    xs = "xs"
    s = "s"
    m = "m"
    l = "l"
    xl = "xl"

class Product(BaseModel):
    """
    Catalog record shown on the detail page. Built once, never mutated.
    The image map must cover every Color, so a lookup by selected color
    can't miss.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    short_description: str = ""
    description: str = ""
    price: Decimal = Field(..., ge=0)
    sizes: Tuple[Size, ...] = Field(..., min_length=1)
    colors: Tuple[Color, ...] = Field(..., min_length=1)
    images: Mapping[Color, str]

    @field_validator("images", mode="after")
    @classmethod
    def _read_only_images(cls, v: Mapping[Color, str]) -> Mapping[Color, str]:
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def _images_cover_all_colors(self) -> "Product":
        missing = [c.value for c in Color if not self.images.get(c)]
        if missing:
            raise ValueError(f"images missing for colors: {', '.join(missing)}")
        return self

class Selection(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: Color
    size: Size

class SelectorOption(BaseModel):
    value: str
    label: str
    href: str
    selected: bool = False
    aria_label: Optional[str] = None

class PaymentMethod(BaseModel):
    src: str
    alt: str
    width: int = 50
    height: int = 25

class ProductPage(BaseModel):
    product: Product
    selection: Selection
    image_src: str
    image_alt: str
    price_text: str
    size_options: List[SelectorOption]
    color_options: List[SelectorOption]
    payment_methods: List[PaymentMethod]
