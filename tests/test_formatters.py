"""Tests for the formatters package."""

import io
import json

import pytest
from rich.console import Console

from resource_ranker.formatters import (
    JsonFormatter,
    PlainFormatter,
    RichFormatter,
    get_formatter,
    rich_formatter,
)
from resource_ranker.models import ContrastEntry, RankedEntry, RankingReport, SkippedFile


def _make_report(modes=("color", "num", "class")):
    return RankingReport(
        root="/project",
        modes=list(modes),
        limit=10,
        files_scanned=2,
        colors=[RankedEntry("0xffabcdef", 3), RankedEntry("0xff123456", 1)],
        numbers=[RankedEntry(16, 4)],
        classes=[RankedEntry("HomeScreen", 42)],
    )


def _contrast_entry():
    return ContrastEntry(
        color="0xffffffff",
        count=3,
        black_ratio=21.0,
        black_label="AAA",
        white_ratio=1.0,
        white_label="fail",
    )


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("rich"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("plain"), PlainFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_format_returns_valid_json(self):
        data = json.loads(JsonFormatter().format(_make_report()))
        assert data["root"] == "/project"
        assert data["files_scanned"] == 2
        assert data["colors"] == [
            {"key": "0xffabcdef", "count": 3},
            {"key": "0xff123456", "count": 1},
        ]
        assert data["numbers"] == [{"key": 16, "count": 4}]
        assert data["skipped_files"] == []

    def test_contrast_ratios_rounded(self):
        report = _make_report(modes=["contrast"])
        entry = _contrast_entry()
        entry.white_ratio = 1.23456789
        report.contrast = [entry]
        data = json.loads(JsonFormatter().format(report))
        assert data["contrast"][0]["white_ratio"] == 1.2346
        assert data["contrast"][0]["black_label"] == "AAA"


class TestPlainFormatter:
    def test_sections(self):
        text = PlainFormatter().format(_make_report())
        assert text == (
            "Top Colors:\n"
            "[0xffabcdef=3, 0xff123456=1]\n"
            "\n"
            "Top Magic Numbers:\n"
            "[16=4]\n"
            "\n"
            "Top Largest Classes:\n"
            "[HomeScreen=42]\n"
            "\n"
        )

    def test_only_requested_modes(self):
        text = PlainFormatter().format(_make_report(modes=["num"]))
        assert text == "Top Magic Numbers:\n[16=4]\n\n"

    def test_empty_ranking(self):
        report = _make_report(modes=["class"])
        report.classes = []
        assert PlainFormatter().format(report) == "Top Largest Classes:\n[]\n\n"

    def test_contrast_block(self):
        report = _make_report(modes=["contrast"])
        report.contrast = [_contrast_entry()]
        assert PlainFormatter().format(report) == (
            "0xffffffff: 3 times\n"
            "Black: 21.00 (AAA) / White: 1.00 (fail)\n"
            "\n"
        )


class TestRichFormatter:
    @pytest.fixture
    def output(self, monkeypatch):
        buffer = io.StringIO()
        monkeypatch.setattr(
            rich_formatter, "console", Console(file=buffer, width=120, color_system=None)
        )
        return buffer

    def test_tables(self, output):
        RichFormatter().render(_make_report())
        text = output.getvalue()
        assert "Top Colors" in text
        assert "0xffabcdef" in text
        assert "Top Magic Numbers" in text
        assert "Top Largest Classes" in text
        assert "HomeScreen" in text

    def test_format_returns_empty_string(self, output):
        assert RichFormatter().format(_make_report()) == ""
        assert "Top Colors" in output.getvalue()

    def test_empty_section(self, output):
        report = _make_report(modes=["num"])
        report.numbers = []
        RichFormatter().render(report)
        assert "none found" in output.getvalue()

    def test_contrast_table(self, output):
        report = _make_report(modes=["contrast"])
        report.contrast = [_contrast_entry()]
        RichFormatter().render(report)
        text = output.getvalue()
        assert "Contrast" in text
        assert "21.00" in text
        assert "AAA" in text
        assert "Top Colors" not in text

    def test_keys_are_not_markup(self, output):
        report = _make_report(modes=["color"])
        report.colors = [RankedEntry("[bold]x", 1)]
        RichFormatter().render(report)
        assert "[bold]x" in output.getvalue()

    def test_skipped_files_notice(self, output):
        report = _make_report()
        report.skipped_files = [SkippedFile(path="/project/big.dart", reason="too big")]
        RichFormatter().render(report)
        assert "1 file(s) could not be read" in output.getvalue()

    def test_contrast_key_is_not_markup(self, output):
        report = _make_report(modes=["contrast"])
        entry = _contrast_entry()
        entry.color = "[/x]abcdef"
        report.contrast = [entry]
        RichFormatter().render(report)
        assert "[/x]abcdef" in output.getvalue()
