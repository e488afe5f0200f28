import pytest

from storefront.services.catalog import InMemoryCatalog, ProductNotFound, STUB_PRODUCT, StubCatalog, get_catalog

def test_stub_catalog_ignores_id():
    cat = StubCatalog()
    assert cat.get("1") is STUB_PRODUCT
    assert cat.get("999") is STUB_PRODUCT
    assert cat.get("not-a-number") is STUB_PRODUCT

def test_default_dependency_is_stub():
    assert get_catalog().get("42") is STUB_PRODUCT

def test_in_memory_lookup(beanie):
    cat = InMemoryCatalog([STUB_PRODUCT, beanie])
    assert len(cat) == 2
    assert cat.get("7") is beanie
    assert cat.get("1") is STUB_PRODUCT

@pytest.mark.parametrize("pid", ["2", "abc", ""])
def test_in_memory_unknown_id(pid):
    cat = InMemoryCatalog([STUB_PRODUCT])
    with pytest.raises(ProductNotFound) as exc:
        cat.get(pid)
    assert exc.value.product_id == pid

def test_in_memory_duplicate_ids():
    with pytest.raises(ValueError):
        InMemoryCatalog([STUB_PRODUCT, STUB_PRODUCT])
