from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.app import app
from storefront.schemas import Color, Product, Size

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def beanie():
    return Product(
        id=7,
        name="Thermal Knit Beanie",
        description="Warm & soft.",
        price=Decimal("19"),
        sizes=[Size.m, Size.l],
        colors=[Color.green, Color.gray],
        images={Color.gray: "/products/7g.png", Color.purple: "/products/7p.png", Color.green: "/products/7gr.png"},
    )
