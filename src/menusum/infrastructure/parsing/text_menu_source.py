"""Text-file-backed implementation of MenuSource.

File format, one entry per line::

    $15.05
    mixed fruit,$2.15
    french fries,$2.75

A bare currency line starts a new group; ``<name>,<price>`` lines add
dishes to it.  A file may hold any number of groups.  Blank lines are
ignored.  Lines that cannot be used are reported through the injected
reporter and skipped, so one bad line never aborts the whole file.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from menusum.domain.exceptions import ValidationError
from menusum.domain.model.menu import Dish, MenuGroup
from menusum.domain.model.value_objects import Money
from menusum.domain.repository.menu_source import IssueReporter, MenuSource, ParseIssue

_DISH_RE = re.compile(r"^(.+),(\$\d+\.\d{2})$")


class TextMenuSource(MenuSource):

    def __init__(self, file_path: Path, reporter: IssueReporter) -> None:
        self._file_path = file_path
        self._reporter = reporter

    # --- MenuSource interface -------------------------------------------------

    @property
    def name(self) -> str:
        return str(self._file_path)

    def groups(self) -> Iterator[MenuGroup]:
        with self._file_path.open(encoding="utf-8") as handle:
            yield from self.parse_lines(handle)

    # --- Parsing --------------------------------------------------------------

    def parse_lines(self, lines: Iterable[str]) -> Iterator[MenuGroup]:
        target: Money | None = None
        target_line: int | None = None
        dishes: list[Dish] = []

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue

            if Money.is_currency(line):
                if target is not None:
                    if dishes:
                        yield MenuGroup(target, tuple(dishes), target_line)
                    else:
                        self._report(
                            target_line,
                            f"price target found without dishes, ignored - {target}",
                        )
                target = Money.parse(line)
                target_line = line_number
                dishes = []
                continue

            match = _DISH_RE.match(line)
            if match is None:
                self._report(line_number, f"unexpected data found, ignored - {line}")
                continue

            if target is None:
                self._report(
                    line_number, f"found dishes before target price, ignoring - {line}"
                )
                continue

            name, price = match.groups()
            try:
                dishes.append(Dish(name, Money.parse(price)))
            except ValidationError as exc:
                self._report(line_number, f"{exc}, ignored - {line}")

        if target is not None:
            if dishes:
                yield MenuGroup(target, tuple(dishes), target_line)
            else:
                self._report(
                    target_line,
                    "found target price at end of file with no dishes, ignoring",
                )

    def _report(self, line: int | None, message: str) -> None:
        self._reporter(ParseIssue(source=self.name, line=line, message=message))
