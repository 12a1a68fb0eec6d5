"""Shared fixtures: a minimal copy of the instance-types page layout."""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

HEADER_CELLS = (
    "Instance Type", "vCPU", "Memory (GiB)", "Storage (GB)", "Networking Performance",
    "Physical Processor", "Clock Speed (GHz)", "Intel AVX", "Intel AVX2",
    "Intel Turbo", "EBS OPT", "Enhanced Networking",
)

DATA_ROWS = (
    ("t2.micro", "1", "1", "EBS Only", "Low to Moderate", "Intel Xeon family",
     "3.3", "Yes", "-", "Yes", "-", "-"),
    ("m4.large", "2", "8", "EBS Only", "Moderate", "Intel Xeon E5-2676 v3",
     "2.4", "Yes", "Yes", "Yes", "Yes", "Yes"),
    ("c3.xlarge", "4", "7.5", "2 x 40 SSD", "Moderate", "Intel Xeon E5-2680 v2",
     "2.8", "Yes", "-", "Yes", "Yes", "Yes"),
)


def render_row(cells: Sequence[str], tag: str = "td") -> str:
    return "<tr>" + "".join(f"<{tag}>{c}</{tag}>" for c in cells) + "</tr>"


def render_page(
    rows: Sequence[Sequence[str]] = DATA_ROWS,
    *,
    header_classes: str = "section title-wrapper",
    table_classes: str = "section table-wrapper",
    anchor_id: str = "instance-type-matrix",
) -> str:
    body = "\n".join(render_row(r) for r in rows)
    return f"""\
<!DOCTYPE html>
<html>
<head><title>Amazon EC2 Instance Types</title></head>
<body>
  <div class="section intro"><p>Instance types comprise varying combinations.</p></div>
  <div class="{header_classes}">
    <div class="title">
      <h2 id="{anchor_id}">Instance Type Matrix</h2>
    </div>
  </div>
  <!-- spacer between header and table -->
  <div class="section divider"></div>
  <div class="{table_classes}">
    <table>
      {render_row(HEADER_CELLS, tag="th")}
      {body}
    </table>
  </div>
</body>
</html>
"""


@pytest.fixture()
def page_html() -> str:
    """A well-formed page: one header row plus three data rows."""
    return render_page()


@pytest.fixture()
def make_page() -> Callable[..., str]:
    return render_page


@pytest.fixture()
def data_rows() -> tuple[tuple[str, ...], ...]:
    return DATA_ROWS
