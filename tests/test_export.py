"""Tests for CSV and JSON exports."""

import csv
import io
import json

import pytest

from cba.results.export import (
    CSV_HEADER,
    EmptyExportError,
    build_results,
    export_csv,
    to_csv,
    to_json,
)


class TestToCsv:
    """Tests for to_csv()."""

    def test_header_only_for_empty(self):
        """No treatments gives just the header."""
        assert to_csv([]) == "Treatment,PV benefits,PV costs,NPV,BCR,ROI,Notes"

    def test_line_count(self, demo_store):
        """Header plus one line per treatment."""
        lines = to_csv(demo_store.list()).splitlines()

        assert len(lines) == len(demo_store) + 1
        assert lines[0] == ",".join(CSV_HEADER)

    def test_field_count(self, demo_store):
        """Each data line has seven fields."""
        for line in to_csv(demo_store.list()).splitlines()[1:]:
            assert len(line.split(",")) == 7

    def test_parses_with_embedded_delimiters(self, empty_store):
        """Commas, quotes and newlines in text fields survive a CSV parser."""
        empty_store.add(name='a, "b"', pv_benefits=1.5, pv_costs=3.0, notes="line1\nline2")

        rows = list(csv.reader(io.StringIO(to_csv(empty_store.list()), newline="")))

        assert rows[0] == CSV_HEADER
        assert rows[1:] == [['a, "b"', "1.5", "3", "-1.5", "0.5", "-0.5", "line1\nline2"]]
        assert all(len(row) == len(CSV_HEADER) for row in rows)

    def test_insertion_order(self, demo_store):
        """Rows follow insertion order, not ranking."""
        lines = to_csv(demo_store.list()).splitlines()[1:]
        names = [line.split(",")[0] for line in lines]

        assert names == [
            '"Control / Current practice"',
            '"Improved fertiliser program"',
            '"Precision irrigation upgrade"',
            '"Drought-resilient seed and soil package"',
        ]

    def test_raw_numbers(self, demo_store):
        """Numbers are unformatted; ratios keep full precision."""
        line = to_csv(demo_store.list()).splitlines()[3]

        assert line == (
            '"Precision irrigation upgrade",620000,320000,300000,'
            '1.9375,0.9375,""'
        )

    def test_absent_ratios_empty(self, demo_store):
        """Zero-cost control has empty BCR and ROI fields."""
        line = to_csv(demo_store.list()).splitlines()[1]

        assert line == '"Control / Current practice",0,0,0,,,""'

    def test_quotes_escaped(self, empty_store):
        """Embedded double quotes are doubled."""
        empty_store.add(name='The "best" plan', notes='Says "hi", twice')
        line = to_csv(empty_store.list()).splitlines()[1]

        assert line.startswith('"The ""best"" plan",')
        assert line.endswith(',"Says ""hi"", twice"')

    def test_crlf_line_endings(self, demo_store):
        """Lines are CRLF-separated."""
        assert "\r\n" in to_csv(demo_store.list())


class TestExportCsv:
    """Tests for export_csv()."""

    def test_empty_rejected(self, empty_store):
        """Exporting nothing raises a blocking error."""
        with pytest.raises(EmptyExportError):
            export_csv(empty_store.list())

    def test_error_is_value_error(self):
        """EmptyExportError is a ValueError with a user message."""
        error = EmptyExportError()

        assert isinstance(error, ValueError)
        assert "at least one treatment" in str(error)

    def test_reflects_later_edits(self, demo_store):
        """Exporting again after an edit picks up the new values."""
        before = export_csv(demo_store.list())
        demo_store.update(3, pv_benefits=700000.0)
        after = export_csv(demo_store.list())

        assert after != before
        assert after.splitlines()[3].startswith(
            '"Precision irrigation upgrade",700000,320000,380000,'
        )

    def test_matches_to_csv(self, demo_store):
        """Non-empty export is the CSV text."""
        assert export_csv(demo_store.list()) == to_csv(demo_store.list())


class TestJson:
    """Tests for the JSON results export."""

    def test_ranked_with_rank_numbers(self, demo_store):
        """Treatments appear ranked with 1-based rank."""
        results = build_results(demo_store.list())

        assert [t["rank"] for t in results["treatments"]] == [1, 2, 3, 4]
        assert [t["id"] for t in results["treatments"]] == [3, 4, 2, 1]

    def test_absent_ratios_null(self, demo_store):
        """Absent ratios serialise as null."""
        data = json.loads(to_json(demo_store.list()))
        control = data["treatments"][-1]

        assert control["name"] == "Control / Current practice"
        assert control["bcr"] is None
        assert control["roi"] is None
