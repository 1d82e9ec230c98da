"""Load and validate ROI lookup tables from JSON files."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from idv_roi.tables.schema import ROITables

logger = logging.getLogger(__name__)

# Directory holding the packaged table files
_CONFIG_DIR = Path(__file__).parent / "configs"

BASE_TABLES_FILE = _CONFIG_DIR / "identity_verification_v1.json"
ENHANCED_TABLES_FILE = _CONFIG_DIR / "identity_verification_v2.json"


def load_tables(file_path: Path | None = None) -> ROITables:
    """Load and validate a table set from a JSON file.

    If no path is provided, loads the enhanced V2 tables.
    """
    if file_path is None:
        file_path = ENHANCED_TABLES_FILE

    if not file_path.exists():
        raise FileNotFoundError(f"ROI tables not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    tables = ROITables.model_validate(raw)
    logger.info(
        "Loaded ROI tables %s v%s (%d industries, %d company sizes)",
        tables.id,
        tables.version,
        len(tables.industries),
        len(tables.company_sizes),
    )
    return tables


@lru_cache(maxsize=None)
def get_default_tables() -> ROITables:
    """Tables named by settings, or the packaged enhanced V2 tables."""
    from idv_roi.config import get_settings

    tables_file = get_settings().tables_file
    return load_tables(Path(tables_file) if tables_file else None)


@lru_cache(maxsize=None)
def get_base_tables() -> ROITables:
    """The packaged base V1 tables (three industries, no company sizes)."""
    return load_tables(BASE_TABLES_FILE)
