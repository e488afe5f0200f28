from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging, os

from dotenv import load_dotenv

APP_DIR = Path(__file__).parent
TEMPLATES_DIR = APP_DIR / "templates"

# Load .env early so every module reads the same values
load_dotenv(dotenv_path=APP_DIR / ".env", override=False)

APP_TITLE = os.getenv("STOREFRONT_TITLE", "Storefront")
PUBLIC_DIR = Path(os.getenv("STOREFRONT_PUBLIC_DIR", str(APP_DIR / "public")))
CURRENCY_SYMBOL = os.getenv("STOREFRONT_CURRENCY_SYMBOL", "$")

def parse_log_level(raw: Optional[str]) -> str:
    # unknown names would make Logger.setLevel raise at import
    name = (raw or "").strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"

LOG_LEVEL = parse_log_level(os.getenv("STOREFRONT_LOG_LEVEL"))

def cors_origins() -> List[str]:
    raw = os.getenv("STOREFRONT_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
