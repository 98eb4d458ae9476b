"""
Loader for the records workbook export.

One worksheet per collection (sheet names in config.COLLECTIONS). Row 1
carries the headers, one of which must be ``record_id``; every other
column becomes a record field. The Anmeldungen ``kurs`` column holds
comma-separated course ids.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

import openpyxl

from ..config import COLLECTIONS
from ..exceptions import RecordSourceError
from .utils import split_ids, to_snake_case

logger = logging.getLogger(__name__)

# Columns holding references to other records
_REFERENCE_COLUMNS = {
    "anmeldungen": {"kurs", "teilnehmer"},
    "kurse": {"dozent", "raum"},
}


def load_collection(path: str | Path, collection: str) -> list[dict[str, Any]]:
    """Load one collection sheet as a list of records.

    Assumptions
    -----------
    - Header is row 1; headers are normalised to snake_case.
    - Fully blank rows are skipped.
    - Empty cells are left out of the record's fields.
    - record_id values are stored as strings.

    Returns
    -------
    List of {"record_id": str | None, "fields": dict} in sheet order.
    """
    if collection not in COLLECTIONS:
        raise RecordSourceError(f"Unknown collection '{collection}'", source=str(path))
    sheet_name = COLLECTIONS[collection]["sheet"]

    try:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except FileNotFoundError as e:
        raise RecordSourceError(f"Records workbook not found: {path}", source=str(path)) from e
    except Exception:
        logger.exception("Failed to open records workbook: %s", path)
        raise

    try:
        if sheet_name not in wb.sheetnames:
            raise RecordSourceError(
                f"Sheet '{sheet_name}' not found in {path}", source=str(path)
            )
        ws = wb[sheet_name]
        rows = ws.iter_rows(values_only=True)

        header = next(rows, None)
        if header is None or all(h is None for h in header):
            logger.warning("Sheet '%s' is empty", sheet_name)
            return []

        columns = [to_snake_case(h) if h is not None else None for h in header]
        if "record_id" not in columns:
            raise RecordSourceError(
                f"Sheet '{sheet_name}' has no record_id column", source=str(path)
            )

        reference_columns = _REFERENCE_COLUMNS.get(collection, set())
        records = []
        for row in rows:
            if all(v is None for v in row):
                continue
            values = {col: val for col, val in zip(columns, row) if col}
            raw_id = values.pop("record_id", None)

            fields = {}
            for col, val in values.items():
                if val is None:
                    continue
                fields[col] = split_ids(val) if col in reference_columns else val

            ids = split_ids(raw_id)
            records.append({
                "record_id": ids[0] if ids else None,
                "fields": fields,
            })
    finally:
        wb.close()

    logger.info("Loaded %d %s records from %s", len(records), collection, path)
    return records


class WorkbookRecordSource:
    """Record source backed by the workbook export.

    Each fetch opens the workbook in a worker thread, so the five fetches
    can run concurrently.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def _get(self, collection: str) -> list[dict[str, Any]]:
        return await asyncio.to_thread(load_collection, self.path, collection)

    async def get_dozenten(self) -> list[dict[str, Any]]:
        return await self._get("dozenten")

    async def get_raeume(self) -> list[dict[str, Any]]:
        return await self._get("raeume")

    async def get_teilnehmer(self) -> list[dict[str, Any]]:
        return await self._get("teilnehmer")

    async def get_kurse(self) -> list[dict[str, Any]]:
        return await self._get("kurse")

    async def get_anmeldungen(self) -> list[dict[str, Any]]:
        return await self._get("anmeldungen")
