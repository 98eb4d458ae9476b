"""
Data transforms: flatten raw record-service records into DataFrames.

Records come as ``{"record_id": ..., "fields": {...}}``. A record without a
``fields`` mapping is read flat, its own keys being the fields. Every field
is optional; missing values stay missing here and get their defaults in
kpis.py.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from .loaders.utils import safe_float

logger = logging.getLogger(__name__)

KURS_COLUMNS = ["record_id", "titel", "status", "preis", "startdatum", "max_teilnehmer"]
ANMELDUNG_COLUMNS = ["record_id", "bezahlt", "kurs"]


def record_id(record: Any) -> Any:
    """Return the record id, accepting 'id' for flat records."""
    if not isinstance(record, Mapping):
        return None
    if "record_id" in record:
        return record["record_id"]
    return record.get("id")


def record_fields(record: Any) -> dict:
    """Return the field mapping of a record, never None."""
    if not isinstance(record, Mapping):
        return {}
    if "fields" not in record:
        return {k: v for k, v in record.items() if k not in ("record_id", "id")}
    fields = record["fields"]
    if isinstance(fields, Mapping):
        return dict(fields)
    return {}


def reference_ids(val: Any) -> list:
    """Normalise an enrollment's course reference to a list of ids."""
    if val is None:
        return []
    if isinstance(val, (str, int)) and not isinstance(val, bool):
        return [val]
    if isinstance(val, Iterable) and not isinstance(val, Mapping):
        return [
            item for item in val
            if isinstance(item, (str, int)) and not isinstance(item, bool)
        ]
    return []


def build_dim_kurs(kurse: Iterable[Any]) -> pd.DataFrame:
    """One row per course record, input order preserved.

    Returns
    -------
    DataFrame with columns:
        record_id, titel, status, preis, startdatum, max_teilnehmer
    """
    rows = []
    for kurs in kurse:
        fields = record_fields(kurs)
        rows.append({
            "record_id": record_id(kurs),
            "titel": fields.get("titel"),
            "status": fields.get("status"),
            "preis": safe_float(fields.get("preis")),
            "startdatum": fields.get("startdatum"),
            "max_teilnehmer": fields.get("max_teilnehmer"),
        })

    df = pd.DataFrame(rows, columns=KURS_COLUMNS)
    df["preis"] = pd.to_numeric(df["preis"], errors="coerce")
    logger.debug("Built dim_kurs with %d rows", len(df))
    return df


def build_fact_anmeldung(anmeldungen: Iterable[Any]) -> pd.DataFrame:
    """One row per enrollment record, input order preserved.

    ``bezahlt`` is True only where the raw field is the boolean True.
    ``kurs`` always holds a list of referenced course ids.

    Returns
    -------
    DataFrame with columns:
        record_id, bezahlt, kurs
    """
    rows = []
    for anmeldung in anmeldungen:
        fields = record_fields(anmeldung)
        rows.append({
            "record_id": record_id(anmeldung),
            "bezahlt": fields.get("bezahlt") is True,
            "kurs": reference_ids(fields.get("kurs")),
        })

    df = pd.DataFrame(rows, columns=ANMELDUNG_COLUMNS)
    df["bezahlt"] = df["bezahlt"].astype(bool)
    logger.debug("Built fact_anmeldung with %d rows", len(df))
    return df
