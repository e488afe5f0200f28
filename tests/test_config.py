import pytest

from storefront.config import parse_log_level

@pytest.mark.parametrize("raw,expected", [
    ("debug", "DEBUG"),
    (" WARNING ", "WARNING"),
    ("error", "ERROR"),
    ("VERBOSE", "INFO"),
    ("", "INFO"),
    (None, "INFO"),
])
def test_parse_log_level(raw, expected):
    assert parse_log_level(raw) == expected
