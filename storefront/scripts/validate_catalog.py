"""
Quick validator: every product must build (image map covers all colors)
and every image must be a site-relative path like /products/1g.png.
Checks the stub record by default, or a JSON list of products if given.
"""
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import argparse, json, sys

from pydantic import ValidationError

from storefront.schemas import Product
from storefront.services.catalog import STUB_PRODUCT

def is_site_relative(u: str) -> bool:
    return u.startswith("/") and not u.startswith("//")

def check(products: List[Product]) -> List[str]:
    problems = []
    for p in products:
        for color, path in p.images.items():
            if not is_site_relative(path):
                problems.append(f"product {p.id}: {color.value} image {path!r} is not site-relative")
    return problems

def load(path: Path) -> List[Product]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return [Product.model_validate(it) for it in data]

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("catalog", nargs="?", type=Path, help="JSON file with a list of products")
    args = ap.parse_args(argv)

    try:
        products = load(args.catalog) if args.catalog else [STUB_PRODUCT]
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"Invalid catalog: {e}")
        return 1

    problems = check(products)
    for msg in problems:
        print(msg)
    print(f"Validated {len(products)} products. Problems: {len(problems)}")
    return 1 if problems else 0

if __name__ == "__main__":
    sys.exit(main())
