"""
Configuration: collection registry, course status registry, file paths, constants.

COURSE_STATUSES maps each known course status to its display label and the
colour token the status chart uses. Its insertion order is the chart order.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths — adjust these if the export moves
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent.parent

RECORDS_FILE = DATA_DIR / "kursverwaltung.xlsx"

# ---------------------------------------------------------------------------
# App identity
# ---------------------------------------------------------------------------
APP_NAME = "KursManager"

# ---------------------------------------------------------------------------
# Collection Registry
# ---------------------------------------------------------------------------
# label: display label used by the quick-access overview
# sheet: worksheet name in the records workbook
# Order matches the record-service fetch order.
COLLECTIONS: dict[str, dict] = {
    "dozenten": {
        "label": "Dozenten",
        "sheet": "Dozenten",
    },
    "raeume": {
        "label": "Räume",
        "sheet": "Raeume",
    },
    "teilnehmer": {
        "label": "Teilnehmer",
        "sheet": "Teilnehmer",
    },
    "kurse": {
        "label": "Kurse",
        "sheet": "Kurse",
    },
    "anmeldungen": {
        "label": "Anmeldungen",
        "sheet": "Anmeldungen",
    },
}

# ---------------------------------------------------------------------------
# Course Status Registry
# ---------------------------------------------------------------------------
COURSE_STATUSES: dict[str, dict] = {
    "geplant": {
        "label": "Geplant",
        "color": "oklch(0.55 0.18 258)",
    },
    "aktiv": {
        "label": "Aktiv",
        "color": "oklch(0.52 0.15 162)",
    },
    "abgeschlossen": {
        "label": "Abgeschlossen",
        "color": "oklch(0.52 0.02 260)",
    },
    "abgesagt": {
        "label": "Abgesagt",
        "color": "oklch(0.58 0.18 25)",
    },
}

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
PREVIEW_LIMIT = 5
REVENUE_SUBLABEL = "kalkuliert"
