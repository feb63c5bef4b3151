"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolveOptions:
    """Input: run-time switches chosen at the composition root."""

    verbose: bool = False
    silent_errors: bool = False
    item_separator: str = ","
    choice_separator: str = "|"


@dataclass(frozen=True)
class GroupReportDTO:
    """Output: the solutions for one target/dish group as displayed to the user."""

    target: str  # formatted, e.g. "$15.05"
    lines: list[str]
    solution_count: int
    output: list[str]  # solution lines plus the trailing count
