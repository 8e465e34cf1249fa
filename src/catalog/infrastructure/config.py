"""
Configuration settings for the catalog.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings:
    """Settings loaded from environment variables (and a local .env)."""

    def __init__(self) -> None:
        self.products_file = Path(
            os.getenv(
                "CATALOG_PRODUCTS_FILE",
                str(_PROJECT_ROOT / "data" / "products.json"),
            )
        )
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
