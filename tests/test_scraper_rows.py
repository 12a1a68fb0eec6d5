"""Tests for converting a table row into an InstanceType."""

from __future__ import annotations

import pytest

from resize.scraper.errors import (
    ColumnCountMismatch,
    EmptyFieldError,
    NumericParseError,
    RowParseError,
)
from resize.scraper.models import InstanceType
from resize.scraper.rows import parse_row
from resize.scraper.search import by_tag, find_first
from resize.scraper.tree import ROOT, parse_document

_GOOD = ["m4.large", "2", "8", "EBS Only", "Moderate", "Intel Xeon E5-2676 v3",
         "2.4", "Yes", "Yes", "Yes", "Yes", "Yes"]


def _row(cells, tag: str = "td"):
    html = "<table><tr>" + "".join(f"<{tag}>{c}</{tag}>" for c in cells) + "</tr></table>"
    doc = parse_document(html)
    return doc, find_first(doc, ROOT, by_tag("tr"))


def _with(index: int, value: str) -> list[str]:
    cells = list(_GOOD)
    cells[index] = value
    return cells


class TestParseRow:
    def test_well_formed_row(self) -> None:
        t = parse_row(*_row(_GOOD))
        assert t == InstanceType(
            name="m4.large",
            cpus=2,
            memory=8.0,
            storage="EBS Only",
            network_spec="Moderate",
            processor="Intel Xeon E5-2676 v3",
            clock_speed=2.4,
            intel_avx=True,
            intel_avx2=True,
            intel_turbo=True,
            ebs_opt=True,
            enhanced_networking=True,
        )

    def test_cells_with_markup(self) -> None:
        cells = _with(5, "<span>Intel Xeon</span>\n  <sup>E5-2676 v3</sup>")
        cells[3] = "<b>2</b> x <b>40</b>\n SSD"
        t = parse_row(*_row(cells))
        assert t.processor == "Intel Xeon E5-2676 v3"
        assert t.storage == "2 x 40 SSD"

    def test_numeric_cells_are_trimmed(self) -> None:
        cells = _with(1, "  36 ")
        cells[2] = "\n60.5\n"
        t = parse_row(*_row(cells))
        assert t.cpus == 36
        assert t.memory == 60.5

    @pytest.mark.parametrize("count", [0, 11, 13])
    def test_column_count_mismatch(self, count: int) -> None:
        cells = (_GOOD * 2)[:count]
        with pytest.raises(ColumnCountMismatch) as exc_info:
            parse_row(*_row(cells))
        assert exc_info.value.expected == 12
        assert exc_info.value.actual == count

    def test_header_cells_are_not_columns(self) -> None:
        with pytest.raises(ColumnCountMismatch) as exc_info:
            parse_row(*_row(_GOOD, tag="th"))
        assert exc_info.value.actual == 0

    @pytest.mark.parametrize("value", ["Yes", "YES", "yes", " yes "])
    def test_boolean_true(self, value: str) -> None:
        assert parse_row(*_row(_with(7, value))).intel_avx is True

    @pytest.mark.parametrize("value", ["No", "", "n/a", "maybe", "-", "yes!"])
    def test_boolean_false(self, value: str) -> None:
        assert parse_row(*_row(_with(11, value))).enhanced_networking is False

    @pytest.mark.parametrize(
        "index, field, value",
        [
            (1, "CPUs", "n/a"),
            (1, "CPUs", "2.5"),
            (1, "CPUs", ""),
            (2, "Memory", "8 GiB"),
            (2, "Memory", "nan"),
            (6, "ClockSpeed", "2.4 GHz"),
            (6, "ClockSpeed", "inf"),
        ],
    )
    def test_numeric_parse_error(self, index: int, field: str, value: str) -> None:
        with pytest.raises(NumericParseError) as exc_info:
            parse_row(*_row(_with(index, value)))
        assert exc_info.value.field == field
        assert exc_info.value.text == value
        assert f"'{value}'" in str(exc_info.value)

    def test_empty_name(self) -> None:
        with pytest.raises(EmptyFieldError) as exc_info:
            parse_row(*_row(_with(0, "   ")))
        assert exc_info.value.field == "Name"

    def test_row_errors_share_a_base(self) -> None:
        with pytest.raises(RowParseError):
            parse_row(*_row(_with(1, "many")))
