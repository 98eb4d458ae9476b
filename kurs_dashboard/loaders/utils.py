"""
Shared utilities for record ingestion: date normalisation, numeric coercion,
column renaming, reference-id splitting.
"""

import logging
import re
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)


def normalise_date(val: Any) -> pd.Timestamp | None:
    """Convert an ISO-8601 string, datetime or Excel serial number to pd.Timestamp.

    Excel serial numbers use the 1899-12-30 epoch. Returns None for missing
    or unparseable values.
    """
    if val is None or val == "":
        return None
    if isinstance(val, pd.Timestamp):
        return val
    if isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        try:
            return pd.Timestamp("1899-12-30") + pd.Timedelta(days=int(val))
        except (ValueError, OverflowError):
            logger.warning("Could not convert serial number %s to date", val)
            return None
    try:
        ts = pd.Timestamp(val)
    except (ValueError, TypeError):
        logger.warning("Could not parse date value: %s", val)
        return None
    if pd.isna(ts):
        return None
    return ts


def to_snake_case(name: str) -> str:
    """Convert a column header to snake_case.

    Handles spaces, hyphens, dots and German umlauts.
    """
    s = str(name).strip()
    s = s.replace("ä", "ae").replace("ö", "oe").replace("ü", "ue").replace("ß", "ss")
    s = s.replace("Ä", "Ae").replace("Ö", "Oe").replace("Ü", "Ue")
    s = s.replace("-", "_").replace(".", "_")
    # Collapse whitespace and special chars to underscores
    s = re.sub(r"[^a-zA-Z0-9]+", "_", s)
    # CamelCase to snake_case
    s = re.sub(r"([a-z])([A-Z])", r"\1_\2", s)
    s = s.lower().strip("_")
    s = re.sub(r"_+", "_", s)
    return s


def safe_float(val: Any) -> float | None:
    """Coerce a value to float, returning None for non-numeric values."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
        try:
            return float(val)
        except ValueError:
            return None
    try:
        result = float(val)
    except (ValueError, TypeError):
        return None
    if pd.isna(result):
        return None
    return result


def split_ids(val: Any) -> list[str]:
    """Split a comma-separated reference cell into a list of record ids.

    Integral numbers (Excel stores bare numeric ids as floats) are rendered
    without a decimal part.
    """
    if val is None:
        return []
    if isinstance(val, float) and val.is_integer():
        return [str(int(val))]
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return [str(val)]
    return [part.strip() for part in str(val).split(",") if part.strip()]
