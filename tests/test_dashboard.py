"""Tests for get_stats and the dashboard projections."""

import copy

import pandas as pd
import pytest

from kurs_dashboard.dashboard import (
    Stats,
    get_collection_overview,
    get_hero_kpis,
    get_payment_progress,
    get_recent_courses,
    get_stats,
    get_status_chart_data,
)


def _stats(collections: dict) -> Stats:
    return get_stats(**collections)


class TestGetStats:
    def test_full_snapshot(self, collections):
        stats = _stats(collections)

        assert stats.dozenten == 1
        assert stats.raeume == 2
        assert stats.teilnehmer == 3
        assert stats.kurse == 6
        assert stats.anmeldungen == 6
        assert stats.aktive_kurse == 2
        assert stats.geplant_kurse == 1
        assert stats.abgeschlossen == 1
        assert stats.abgesagt == 1
        assert stats.bezahlt == 3
        assert stats.unbezahlt == 3
        # k1 100*2 + k2 50 + k3 200 + k5 (no price) + k6 30
        assert stats.umsatz == 480

    def test_bucket_sum_leaves_out_unknown_status(self, collections):
        stats = _stats(collections)
        buckets = stats.geplant_kurse + stats.aktive_kurse + stats.abgeschlossen + stats.abgesagt
        assert buckets == stats.kurse - 1

    def test_scenario_empty(self):
        stats = get_stats([], [], [], [], [])
        assert stats == Stats()
        assert stats.kurse_list == ()
        assert stats.anmeldungen_list == ()
        assert stats.umsatz == 0

    def test_scenario_one_active_course_two_enrollments(self):
        stats = get_stats(
            kurse=[{"id": "c1", "status": "aktiv", "preis": 100}],
            anmeldungen=[
                {"id": "a1", "kurs": ["c1"], "bezahlt": True},
                {"id": "a2", "kurs": ["c1"]},
            ],
            dozenten=[], raeume=[], teilnehmer=[],
        )
        assert stats.aktive_kurse == 1
        assert stats.bezahlt == 1
        assert stats.unbezahlt == 1
        assert stats.umsatz == 200

    def test_scenario_unknown_status_without_enrollments(self):
        stats = get_stats(
            kurse=[{"id": "c2", "status": "unknown_status", "preis": 50}],
            anmeldungen=[], dozenten=[], raeume=[], teilnehmer=[],
        )
        assert stats.kurse == 1
        assert (stats.geplant_kurse, stats.aktive_kurse, stats.abgeschlossen, stats.abgesagt) == (0, 0, 0, 0)
        assert stats.umsatz == 0

    def test_scenario_seven_courses_preview_first_five(self):
        kurse = [{"record_id": f"c{i}", "fields": {}} for i in range(1, 8)]
        stats = get_stats(kurse, [], [], [], [])
        assert [k["record_id"] for k in stats.kurse_list] == ["c1", "c2", "c3", "c4", "c5"]

    def test_enrollment_preview_keeps_input_order(self, collections):
        stats = _stats(collections)
        assert list(stats.anmeldungen_list) == collections["anmeldungen"][:5]

    def test_idempotent(self, collections):
        assert _stats(collections) == _stats(collections)

    def test_inputs_are_not_mutated(self, collections):
        before = copy.deepcopy(collections)
        _stats(collections)
        assert collections == before

    def test_records_with_no_fields_at_all(self):
        stats = get_stats(
            kurse=[{"record_id": "k1"}, {"record_id": "k2", "fields": None}],
            anmeldungen=[{"record_id": "a1"}],
            dozenten=[], raeume=[], teilnehmer=[],
        )
        assert stats.kurse == 2
        assert stats.unbezahlt == 1
        assert stats.umsatz == 0

    def test_equal_but_unhashable(self, collections):
        stats = _stats(collections)
        assert stats == _stats(collections)
        with pytest.raises(TypeError):
            hash(stats)
        with pytest.raises(TypeError):
            hash(Stats())

    def test_to_dict(self, collections):
        data = _stats(collections).to_dict()
        assert data["kurse"] == 6
        assert len(data["kurse_list"]) == 5


class TestStatusChartData:
    def test_fixed_order_labels_and_values(self, collections):
        chart = get_status_chart_data(_stats(collections))
        assert [entry["name"] for entry in chart] == ["Geplant", "Aktiv", "Abgeschlossen", "Abgesagt"]
        assert [entry["value"] for entry in chart] == [1, 2, 1, 1]
        assert all(entry["color"].startswith("oklch(") for entry in chart)

    def test_always_four_entries(self):
        chart = get_status_chart_data(Stats())
        assert len(chart) == 4
        assert all(entry["value"] == 0 for entry in chart)


class TestPaymentProgress:
    def test_quote(self, collections):
        stats = _stats(collections)
        assert stats.bezahlt_quote == 0.5
        assert get_payment_progress(stats) == {"bezahlt": 3, "unbezahlt": 3, "quote_pct": 50}

    def test_rounds_to_whole_percent(self):
        stats = Stats(anmeldungen=3, bezahlt=2, unbezahlt=1)
        assert get_payment_progress(stats)["quote_pct"] == 67

    @pytest.mark.parametrize("bezahlt, expected", [(1, 13), (5, 63), (4, 50)])
    def test_halves_round_up(self, bezahlt, expected):
        stats = Stats(anmeldungen=8, bezahlt=bezahlt, unbezahlt=8 - bezahlt)
        assert get_payment_progress(stats)["quote_pct"] == expected

    def test_no_enrollments(self):
        assert get_payment_progress(Stats())["quote_pct"] == 0


class TestOverviewCards:
    def test_hero_kpis(self, collections):
        cards = get_hero_kpis(_stats(collections))
        assert [c["key"] for c in cards] == ["kurse", "anmeldungen", "umsatz"]
        assert cards[0]["value"] == 6
        assert cards[0]["sub"] == "2 aktiv"
        assert cards[1]["sub"] == "3 bezahlt"
        assert cards[2]["value"] == 480
        assert cards[2]["sub"] == "kalkuliert"

    def test_collection_overview(self, collections):
        overview = get_collection_overview(_stats(collections))
        assert [(e["label"], e["count"]) for e in overview] == [
            ("Dozenten", 1),
            ("Räume", 2),
            ("Teilnehmer", 3),
            ("Kurse", 6),
            ("Anmeldungen", 6),
        ]


class TestRecentCourses:
    def test_table(self):
        stats = get_stats(
            kurse=[
                {"record_id": "k1", "fields": {"titel": "Python", "status": "aktiv",
                                                "startdatum": "2026-03-02", "preis": 390,
                                                "max_teilnehmer": 12}},
                {"record_id": "k2", "fields": {"titel": "Excel", "status": "pausiert"}},
                {"record_id": "k3", "fields": {"startdatum": "not a date"}},
            ],
            anmeldungen=[], dozenten=[], raeume=[], teilnehmer=[],
        )
        df = get_recent_courses(stats)

        assert df["record_id"].tolist() == ["k1", "k2", "k3"]
        assert df["status_label"].tolist() == ["Aktiv", "pausiert", ""]
        assert df.loc[0, "startdatum"] == pd.Timestamp("2026-03-02")
        assert pd.isna(df.loc[1, "startdatum"])
        assert pd.isna(df.loc[2, "startdatum"])
        assert df.loc[0, "preis"] == 390
        assert df.loc[0, "max_teilnehmer"] == 12

    def test_empty(self):
        df = get_recent_courses(Stats())
        assert df.empty
        assert "status_label" in df.columns
