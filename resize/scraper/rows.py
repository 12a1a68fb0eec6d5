"""Convert one ``<tr>`` of the instance-type matrix into an InstanceType."""

from __future__ import annotations

import re

from resize.scraper.errors import ColumnCountMismatch, EmptyFieldError, NumericParseError
from resize.scraper.models import InstanceType
from resize.scraper.search import by_tag, find_all
from resize.scraper.tree import Document, text

COLUMN_COUNT = 12

# Plain ASCII numerals only; int()/float() would also take "1_000", "nan", "inf"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _yes_no(value: str) -> bool:
    return value.lower() == "yes"


def _parse_int(field: str, value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise NumericParseError(field, value)
    return int(value)


def _parse_float(field: str, value: str) -> float:
    if not _DECIMAL_RE.fullmatch(value):
        raise NumericParseError(field, value)
    return float(value)


def parse_row(doc: Document, row: int) -> InstanceType:
    """Parse the row at handle *row*.

    Raises:
        ColumnCountMismatch: The row does not hold exactly 12 ``<td>`` cells.
        EmptyFieldError: The name cell is empty.
        NumericParseError: CPUs, Memory or ClockSpeed is not a number.
    """
    cells = find_all(doc, row, by_tag("td"))
    if len(cells) != COLUMN_COUNT:
        raise ColumnCountMismatch(COLUMN_COUNT, len(cells))

    cols = [text(doc, cell) for cell in cells]
    if not cols[0]:
        raise EmptyFieldError("Name")

    return InstanceType(
        name=cols[0],
        cpus=_parse_int("CPUs", cols[1]),
        memory=_parse_float("Memory", cols[2]),
        storage=cols[3],
        network_spec=cols[4],
        processor=cols[5],
        clock_speed=_parse_float("ClockSpeed", cols[6]),
        intel_avx=_yes_no(cols[7]),
        intel_avx2=_yes_no(cols[8]),
        intel_turbo=_yes_no(cols[9]),
        ebs_opt=_yes_no(cols[10]),
        enhanced_networking=_yes_no(cols[11]),
    )
