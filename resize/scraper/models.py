"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class InstanceType:
    """One row of the EC2 instance-type matrix.

    Field order mirrors the column order of the source table.
    """

    name: str
    cpus: int
    memory: float  # GiB
    storage: str  # free-form, e.g. "2 x 40 SSD"
    network_spec: str
    processor: str
    clock_speed: float  # GHz
    intel_avx: bool
    intel_avx2: bool
    intel_turbo: bool
    ebs_opt: bool
    enhanced_networking: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
