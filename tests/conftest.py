import pytest

from kurs_dashboard.loaders import InMemoryRecordSource


def kurs(record_id: str, **fields) -> dict:
    return {"record_id": record_id, "fields": fields}


def anmeldung(record_id: str, **fields) -> dict:
    return {"record_id": record_id, "fields": fields}


@pytest.fixture
def collections() -> dict[str, list[dict]]:
    """Small snapshot covering every status, payment flag and a price gap."""
    return {
        "dozenten": [{"record_id": "d1", "fields": {"name": "Anna Becker"}}],
        "raeume": [
            {"record_id": "r1", "fields": {"raumname": "A.101"}},
            {"record_id": "r2", "fields": {"raumname": "B.012"}},
        ],
        "teilnehmer": [
            {"record_id": "t1", "fields": {}},
            {"record_id": "t2", "fields": {}},
            {"record_id": "t3", "fields": {}},
        ],
        "kurse": [
            kurs("k1", titel="Python", status="aktiv", preis=100),
            kurs("k2", titel="Excel", status="geplant", preis=50),
            kurs("k3", titel="Scrum", status="abgeschlossen", preis=200),
            kurs("k4", titel="Rhetorik", status="abgesagt", preis=80),
            kurs("k5", titel="Englisch", status="aktiv"),
            kurs("k6", titel="Buchhaltung", status="pausiert", preis=30),
        ],
        "anmeldungen": [
            anmeldung("a1", kurs=["k1"], bezahlt=True),
            anmeldung("a2", kurs=["k1"], bezahlt=False),
            anmeldung("a3", kurs=["k2", "k3"]),
            anmeldung("a4", kurs=["k5"], bezahlt=True),
            anmeldung("a5", kurs=["k6"], bezahlt="ja"),
            anmeldung("a6", bezahlt=True),
        ],
    }


@pytest.fixture
def source(collections) -> InMemoryRecordSource:
    return InMemoryRecordSource(collections)
