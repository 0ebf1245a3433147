# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for CSV and JSON Mars time exporters."""
import csv
import json
import logging
from datetime import datetime, timedelta, timezone

import pytest

from marsdate.adapters.csv_exporter import CsvMarsTimeExporter
from marsdate.adapters.formatting import MarsDateFormatter
from marsdate.adapters.json_exporter import JsonMarsTimeExporter
from marsdate.domain.earth_mars import DistanceUnit
from marsdate.domain.mars_instant import MarsInstant, timeline
from marsdate.domain.sites import get_site
from marsdate.ports.export import MarsTimeExporter

_START = datetime(2012, 8, 6, 5, 17, 57, tzinfo=timezone.utc)


def _instants(count=4, start=_START):
    return list(timeline(start, start + timedelta(hours=6 * (count - 1)), timedelta(hours=6)))


class TestProtocol:

    def test_csv_is_exporter(self):
        assert isinstance(CsvMarsTimeExporter(), MarsTimeExporter)

    def test_json_is_exporter(self):
        assert isinstance(JsonMarsTimeExporter(), MarsTimeExporter)


# ── CSV ───────────────────────────────────────────────────────────

class TestCsvExporter:

    def test_row_count(self, tmp_path):
        path = str(tmp_path / "mars.csv")
        count = CsvMarsTimeExporter().export(_instants(), path)
        assert count == 4
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4

    def test_header(self, tmp_path):
        path = str(tmp_path / "mars.csv")
        CsvMarsTimeExporter().export(_instants(1), path)
        with open(path, newline='', encoding='utf-8') as f:
            header = next(csv.reader(f))
        assert header[:4] == ["earth_utc", "earth_epoch_millis", "mars_year", "mars_sol_date"]
        assert "site" not in header

    def test_values(self, tmp_path):
        path = str(tmp_path / "mars.csv")
        instants = _instants(2)
        CsvMarsTimeExporter().export(instants, path)
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert int(rows[0]["earth_epoch_millis"]) == instants[0].earth_epoch_millis
        assert float(rows[1]["mars_sol_date"]) == pytest.approx(instants[1].mars_sol_date)
        assert rows[0]["mars_year"] == "31"

    def test_site_columns(self, tmp_path):
        path = str(tmp_path / "mars.csv")
        CsvMarsTimeExporter().export(_instants(), path, site=get_site("curiosity"))
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert rows[0]["site"] == "Curiosity (MSL)"
        assert rows[0]["sol_of_mission"] == "0"
        assert {r["sol_of_mission"] for r in rows} <= {"0", "1"}

    def test_formatter_unit(self, tmp_path):
        path = str(tmp_path / "mars.csv")
        exporter = CsvMarsTimeExporter(MarsDateFormatter(unit=DistanceUnit.KM))
        exporter.export(_instants(1), path)
        with open(path, newline='', encoding='utf-8') as f:
            row = next(csv.DictReader(f))
        assert row["distance_unit"] == "km"
        assert float(row["earth_mars_distance"]) > 1e7

    def test_empty(self, tmp_path):
        path = tmp_path / "empty.csv"
        assert CsvMarsTimeExporter().export([], str(path)) == 0
        assert path.read_text() == ""

    def test_accepts_generator(self, tmp_path):
        path = str(tmp_path / "mars.csv")
        gen = timeline(_START, _START + timedelta(hours=2), timedelta(hours=1))
        assert CsvMarsTimeExporter().export(gen, path) == 3


# ── JSON ──────────────────────────────────────────────────────────

class TestJsonExporter:

    def test_document(self, tmp_path):
        path = tmp_path / "mars.json"
        count = JsonMarsTimeExporter().export(_instants(), str(path))
        document = json.loads(path.read_text(encoding='utf-8'))
        assert count == 4
        assert document["reference_data_version"] == "mars24-2000.1"
        assert document["site"] is None
        assert len(document["records"]) == 4

    def test_site_block(self, tmp_path):
        path = tmp_path / "mars.json"
        JsonMarsTimeExporter().export(_instants(), str(path), site=get_site("curiosity"))
        document = json.loads(path.read_text(encoding='utf-8'))
        assert document["site"]["name"] == "Curiosity (MSL)"
        assert document["site"]["longitude_west_deg"] == pytest.approx(222.5583)
        assert document["site"]["landing_utc"] == "2012-08-06T05:17:57+00:00"
        assert document["records"][0]["sol_of_mission"] == 0

    def test_records_match_formatter(self, tmp_path):
        path = tmp_path / "mars.json"
        instants = _instants(2)
        JsonMarsTimeExporter().export(instants, str(path))
        document = json.loads(path.read_text(encoding='utf-8'))
        assert document["records"][1] == MarsDateFormatter().record(instants[1])

    def test_empty(self, tmp_path):
        path = tmp_path / "empty.json"
        assert JsonMarsTimeExporter().export([], str(path)) == 0
        document = json.loads(path.read_text(encoding='utf-8'))
        assert document["records"] == []
        assert document["reference_data_version"] is None


# ── Pre-1972 warnings ─────────────────────────────────────────────

class TestPre1972Warning:

    _OLD = datetime(1969, 7, 20, 20, 17, tzinfo=timezone.utc)

    def test_csv_warns_once(self, tmp_path, caplog):
        path = str(tmp_path / "old.csv")
        with caplog.at_level(logging.WARNING, logger="marsdate.adapters.csv_exporter"):
            CsvMarsTimeExporter().export(_instants(3, self._OLD), path)
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "1972" in warnings[0].message

    def test_csv_silent_for_modern_instants(self, tmp_path, caplog):
        path = str(tmp_path / "new.csv")
        with caplog.at_level(logging.WARNING, logger="marsdate.adapters.csv_exporter"):
            CsvMarsTimeExporter().export(_instants(), path)
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 0, f"No warning expected, got: {warnings}"

    def test_json_warns(self, tmp_path, caplog):
        path = str(tmp_path / "old.json")
        with caplog.at_level(logging.WARNING, logger="marsdate.adapters.json_exporter"):
            JsonMarsTimeExporter().export(_instants(3, self._OLD), path)
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "1972" in warnings[0].message

    def test_json_silent_for_modern_instants(self, tmp_path, caplog):
        path = str(tmp_path / "new.json")
        with caplog.at_level(logging.WARNING, logger="marsdate.adapters.json_exporter"):
            JsonMarsTimeExporter().export(_instants(), path)
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 0

    def test_single_pre_1972_instant(self, tmp_path, caplog):
        path = str(tmp_path / "one.csv")
        instant = MarsInstant.from_datetime(self._OLD)
        with caplog.at_level(logging.WARNING, logger="marsdate.adapters.csv_exporter"):
            CsvMarsTimeExporter().export([instant], path)
        assert any("approximate" in r.message for r in caplog.records)
