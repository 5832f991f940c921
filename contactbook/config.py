"""
Central configuration loader.
Reads from environment variables (via .env) with sensible defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")

DEFAULT_DB_FILE = "kontakte.db"


def _get(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def _get_bool(key: str, default: bool) -> bool:
    return _get(key, default=str(default)).lower() in ("1", "true", "yes")  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Storage config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StoreConfig:
    db_path: Path
    # off by default: deleting a referenced address leaves a dangling reference
    foreign_keys: bool = False


def get_store_config() -> StoreConfig:
    return StoreConfig(
        db_path=Path(_get("CONTACTBOOK_DB_PATH", default=DEFAULT_DB_FILE)),  # type: ignore[arg-type]
        foreign_keys=_get_bool("CONTACTBOOK_FOREIGN_KEYS", False),
    )


def get_db_path() -> Path:
    return get_store_config().db_path
