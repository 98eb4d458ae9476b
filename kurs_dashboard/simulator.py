"""
Simulated data generator for the Kursverwaltung dashboard.

Generates record-service shaped collections with realistic course prices,
statuses and enrollment patterns. All values are synthetic.
"""

from pathlib import Path

import numpy as np
import openpyxl
import pandas as pd

from .config import COLLECTIONS

# ---------------------------------------------------------------------------
# Typical course catalogue
# ---------------------------------------------------------------------------
_KURSE = [
    ("Python für Einsteiger", 390.0, 12),
    ("Datenanalyse mit Pandas", 490.0, 10),
    ("Projektmanagement kompakt", 290.0, 16),
    ("Englisch B2 Business", 250.0, 14),
    ("Excel für Fortgeschrittene", 190.0, 12),
    ("Rhetorik und Präsentation", 320.0, 8),
    ("Buchhaltung Grundlagen", 280.0, 15),
    ("Webdesign mit HTML & CSS", 350.0, 12),
    ("Agiles Arbeiten mit Scrum", 420.0, 10),
]

# Weights over geplant, aktiv, abgeschlossen, abgesagt
_STATUSES = ["geplant", "aktiv", "abgeschlossen", "abgesagt"]
_STATUS_WEIGHTS = [0.35, 0.35, 0.2, 0.1]

_DOZENTEN = [
    ("Dr. Anna Becker", "Informatik"),
    ("Markus Weber", "Wirtschaft"),
    ("Sabine König", "Sprachen"),
    ("Thomas Lang", "Kommunikation"),
]

_RAEUME = [
    ("A.101", "Hauptgebäude", 20),
    ("A.204", "Hauptgebäude", 14),
    ("B.012", "Nebengebäude", 30),
]

_VORNAMEN = ["Lena", "Jonas", "Mia", "Paul", "Emma", "Felix", "Lea", "Noah", "Hannah", "Elias"]
_NACHNAMEN = ["Müller", "Schmidt", "Fischer", "Wagner", "Hoffmann", "Schulz", "Koch", "Richter"]


def generate_dozenten() -> list[dict]:
    """Generate instructor records."""
    return [
        {"record_id": f"doz{i + 1}", "fields": {"name": name, "fachgebiet": fach}}
        for i, (name, fach) in enumerate(_DOZENTEN)
    ]


def generate_raeume() -> list[dict]:
    """Generate room records."""
    return [
        {"record_id": f"raum{i + 1}", "fields": {"raumname": name, "gebaeude": geb, "kapazitaet": cap}}
        for i, (name, geb, cap) in enumerate(_RAEUME)
    ]


def generate_teilnehmer(n: int = 24, seed: int = 42) -> list[dict]:
    """Generate participant records."""
    rng = np.random.default_rng(seed)
    rows = []
    for i in range(n):
        vorname = _VORNAMEN[rng.integers(len(_VORNAMEN))]
        nachname = _NACHNAMEN[rng.integers(len(_NACHNAMEN))]
        rows.append({
            "record_id": f"tn{i + 1}",
            "fields": {
                "name": f"{vorname} {nachname}",
                "email": f"{vorname.lower()}.{nachname.lower()}{i + 1}@example.de",
            },
        })
    return rows


def generate_kurse(start_month: str = "2026-01-01", seed: int = 42) -> list[dict]:
    """Generate course records.

    The last course carries a status outside the four known ones, and one
    course has no price, so both field-level gaps show up in the stats.
    """
    rng = np.random.default_rng(seed)
    start = pd.Timestamp(start_month)
    rows = []

    for i, (titel, preis, max_tn) in enumerate(_KURSE):
        status = str(rng.choice(_STATUSES, p=_STATUS_WEIGHTS))
        startdatum = start + pd.Timedelta(days=int(rng.integers(0, 180)))
        fields = {
            "titel": titel,
            "status": status,
            "preis": preis,
            "startdatum": startdatum.strftime("%Y-%m-%d"),
            "max_teilnehmer": max_tn,
            "dozent": [f"doz{i % len(_DOZENTEN) + 1}"],
            "raum": [f"raum{i % len(_RAEUME) + 1}"],
        }
        rows.append({"record_id": f"kurs{i + 1}", "fields": fields})

    rows[-1]["fields"]["status"] = "pausiert"
    del rows[-2]["fields"]["preis"]
    return rows


def generate_anmeldungen(
    kurse: list[dict],
    teilnehmer: list[dict],
    n: int = 30,
    seed: int = 42,
) -> list[dict]:
    """Generate enrollment records referencing the given courses and participants.

    Roughly 60% are paid, 30% explicitly unpaid and 10% carry no payment flag.
    """
    rng = np.random.default_rng(seed)
    kurs_ids = [k["record_id"] for k in kurse]
    tn_ids = [t["record_id"] for t in teilnehmer]
    rows = []

    for i in range(n):
        fields = {
            "kurs": [kurs_ids[rng.integers(len(kurs_ids))]] if kurs_ids else [],
            "teilnehmer": [tn_ids[rng.integers(len(tn_ids))]] if tn_ids else [],
        }
        draw = rng.random()
        if draw < 0.6:
            fields["bezahlt"] = True
        elif draw < 0.9:
            fields["bezahlt"] = False
        rows.append({"record_id": f"anm{i + 1}", "fields": fields})

    return rows


def generate_collections(seed: int = 42) -> dict[str, list[dict]]:
    """Generate all five collections, keyed like config.COLLECTIONS."""
    teilnehmer = generate_teilnehmer(seed=seed)
    kurse = generate_kurse(seed=seed)
    return {
        "dozenten": generate_dozenten(),
        "raeume": generate_raeume(),
        "teilnehmer": teilnehmer,
        "kurse": kurse,
        "anmeldungen": generate_anmeldungen(kurse, teilnehmer, seed=seed),
    }


def write_records_workbook(collections: dict[str, list[dict]], path: str | Path) -> Path:
    """Write collections to a workbook in the layout loaders.workbook reads.

    Reference lists are written as comma-separated ids.
    """
    path = Path(path)
    wb = openpyxl.Workbook()
    wb.remove(wb.active)

    for name, meta in COLLECTIONS.items():
        ws = wb.create_sheet(meta["sheet"])
        records = collections.get(name, [])
        columns: list[str] = []
        for record in records:
            for col in record["fields"]:
                if col not in columns:
                    columns.append(col)
        ws.append(["record_id", *columns])
        for record in records:
            row = [record["record_id"]]
            for col in columns:
                val = record["fields"].get(col)
                if isinstance(val, list):
                    val = ",".join(str(v) for v in val)
                row.append(val)
            ws.append(row)

    wb.save(path)
    wb.close()
    return path
