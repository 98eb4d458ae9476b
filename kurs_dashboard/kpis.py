"""
KPI computation functions — pure functions with no side effects.

Provides status bucketing, payment bucketing, the revenue join and
preview selection over the frames built in transforms.py.
"""

import logging
from collections.abc import Iterable
from itertools import islice
from typing import Any

import pandas as pd

from .config import COURSE_STATUSES, PREVIEW_LIMIT

logger = logging.getLogger(__name__)


def count_course_statuses(dim_kurs: pd.DataFrame) -> dict[str, int]:
    """Return {status: count} for the four known course statuses.

    Exact string match only. Courses with a missing, unknown or non-string
    status fall into no bucket, so the bucket sum can be below the total.
    """
    statuses = dim_kurs["status"].map(lambda v: v if isinstance(v, str) else None)
    counts = statuses.value_counts()
    result = {status: int(counts.get(status, 0)) for status in COURSE_STATUSES}

    uncategorised = len(dim_kurs) - sum(result.values())
    if uncategorised:
        logger.debug("%d course(s) without a known status", uncategorised)
    return result


def count_payments(fact_anmeldung: pd.DataFrame) -> tuple[int, int]:
    """Return (paid, unpaid). Unpaid is the complement of paid."""
    paid = int(fact_anmeldung["bezahlt"].sum())
    return paid, len(fact_anmeldung) - paid


def calc_payment_ratio(paid: int, total: int) -> float:
    """Return paid / total, or 0.0 if there are no enrollments."""
    if total == 0:
        return 0.0
    return paid / total


def count_enrollments_per_course(fact_anmeldung: pd.DataFrame) -> pd.Series:
    """Index of course id -> number of enrollments referencing it.

    An enrollment listing the same course more than once counts once.
    """
    refs = fact_anmeldung["kurs"].explode().dropna()
    if refs.empty:
        return pd.Series(dtype="int64")
    refs = refs.reset_index().drop_duplicates()
    return refs["kurs"].value_counts()


def calc_revenue(dim_kurs: pd.DataFrame, fact_anmeldung: pd.DataFrame) -> float:
    """Sum over courses of price × referencing enrollments.

    Missing or non-numeric prices count as 0. Payment status is ignored:
    this is a calculated figure, not booked revenue.
    """
    if dim_kurs.empty or fact_anmeldung.empty:
        return 0.0

    enrollment_counts = count_enrollments_per_course(fact_anmeldung)
    counts = dim_kurs["record_id"].map(enrollment_counts).fillna(0)
    preis = dim_kurs["preis"].fillna(0)
    return float((preis * counts).sum())


def take_preview(records: Iterable[Any], limit: int = PREVIEW_LIMIT) -> tuple:
    """First `limit` records in input order."""
    return tuple(islice(records, limit))
