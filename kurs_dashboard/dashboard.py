"""
Dashboard-ready output functions.

These are the primary entry points for a front end. get_stats() turns the
five record collections into a Stats value; the get_* projections below
shape a Stats into plain dicts or DataFrames for cards, the status chart
and the recent-courses table.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any

import pandas as pd

from .config import COLLECTIONS, COURSE_STATUSES, REVENUE_SUBLABEL
from .kpis import (
    calc_payment_ratio,
    calc_revenue,
    count_course_statuses,
    count_payments,
    take_preview,
)
from .loaders.utils import normalise_date
from .transforms import build_dim_kurs, build_fact_anmeldung

logger = logging.getLogger(__name__)

RECENT_COURSE_COLUMNS = [
    "record_id", "titel", "status", "status_label", "startdatum", "preis", "max_teilnehmer",
]


@dataclass(frozen=True)
class Stats:
    """Summary statistics for one snapshot of the five collections.

    Compares by value but is unhashable: the previews hold record dicts.
    """

    __hash__ = None

    dozenten: int = 0
    raeume: int = 0
    teilnehmer: int = 0
    kurse: int = 0
    anmeldungen: int = 0
    bezahlt: int = 0
    unbezahlt: int = 0
    aktive_kurse: int = 0
    geplant_kurse: int = 0
    abgeschlossen: int = 0
    abgesagt: int = 0
    umsatz: float = 0.0
    kurse_list: tuple[Any, ...] = field(default_factory=tuple)
    anmeldungen_list: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def bezahlt_quote(self) -> float:
        """Share of paid enrollments, 0.0-1.0."""
        return calc_payment_ratio(self.bezahlt, self.anmeldungen)

    def to_dict(self) -> dict:
        return asdict(self)


def get_stats(
    kurse: Sequence[Any],
    anmeldungen: Sequence[Any],
    dozenten: Sequence[Any],
    raeume: Sequence[Any],
    teilnehmer: Sequence[Any],
) -> Stats:
    """Aggregate the five collections into a Stats value.

    Pure: inputs are read, never mutated, and the same input always yields
    an equal Stats. Defined for empty input and for records with any subset
    of optional fields missing.
    """
    kurse = list(kurse)
    anmeldungen = list(anmeldungen)

    dim_kurs = build_dim_kurs(kurse)
    fact_anmeldung = build_fact_anmeldung(anmeldungen)

    status_counts = count_course_statuses(dim_kurs)
    bezahlt, unbezahlt = count_payments(fact_anmeldung)

    stats = Stats(
        dozenten=len(dozenten),
        raeume=len(raeume),
        teilnehmer=len(teilnehmer),
        kurse=len(kurse),
        anmeldungen=len(anmeldungen),
        bezahlt=bezahlt,
        unbezahlt=unbezahlt,
        aktive_kurse=status_counts["aktiv"],
        geplant_kurse=status_counts["geplant"],
        abgeschlossen=status_counts["abgeschlossen"],
        abgesagt=status_counts["abgesagt"],
        umsatz=calc_revenue(dim_kurs, fact_anmeldung),
        kurse_list=take_preview(kurse),
        anmeldungen_list=take_preview(anmeldungen),
    )

    logger.info(
        "Aggregated %d courses, %d enrollments (revenue %.2f)",
        stats.kurse, stats.anmeldungen, stats.umsatz,
    )
    return stats


def get_status_chart_data(stats: Stats) -> list[dict]:
    """Four {name, value, color} entries in the fixed status order."""
    values = {
        "geplant": stats.geplant_kurse,
        "aktiv": stats.aktive_kurse,
        "abgeschlossen": stats.abgeschlossen,
        "abgesagt": stats.abgesagt,
    }
    return [
        {"name": meta["label"], "value": values[status], "color": meta["color"]}
        for status, meta in COURSE_STATUSES.items()
    ]


def get_payment_progress(stats: Stats) -> dict:
    """Paid/open counts and the paid share as a whole percentage, halves rounded up."""
    return {
        "bezahlt": stats.bezahlt,
        "unbezahlt": stats.unbezahlt,
        "quote_pct": math.floor(stats.bezahlt_quote * 100 + 0.5),
    }


def get_hero_kpis(stats: Stats) -> list[dict]:
    """Headline cards: courses, enrollments, calculated revenue."""
    return [
        {"key": "kurse", "label": "Kurse gesamt", "value": stats.kurse,
         "sub": f"{stats.aktive_kurse} aktiv"},
        {"key": "anmeldungen", "label": "Anmeldungen", "value": stats.anmeldungen,
         "sub": f"{stats.bezahlt} bezahlt"},
        {"key": "umsatz", "label": "Gesamtumsatz", "value": stats.umsatz,
         "sub": REVENUE_SUBLABEL},
    ]


def get_collection_overview(stats: Stats) -> list[dict]:
    """Per-collection record counts, in record-service order."""
    return [
        {"collection": name, "label": meta["label"], "count": getattr(stats, name)}
        for name, meta in COLLECTIONS.items()
    ]


def _status_label(status: Any) -> str:
    if not isinstance(status, str):
        return ""
    return COURSE_STATUSES.get(status, {}).get("label", status)


def get_recent_courses(stats: Stats) -> pd.DataFrame:
    """Course preview as a table.

    Returns
    -------
    DataFrame with columns:
        record_id, titel, status, status_label, startdatum, preis, max_teilnehmer

    startdatum is a pd.Timestamp, or None when missing or unparseable.
    """
    if not stats.kurse_list:
        return pd.DataFrame(columns=RECENT_COURSE_COLUMNS)

    df = build_dim_kurs(stats.kurse_list)
    df["status_label"] = df["status"].map(_status_label)
    df["startdatum"] = pd.Series(
        [normalise_date(v) for v in df["startdatum"]], index=df.index, dtype=object,
    )

    return df[RECENT_COURSE_COLUMNS].reset_index(drop=True)
