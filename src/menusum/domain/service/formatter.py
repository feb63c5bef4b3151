"""Domain service: turn numeric solutions into named, printable lines.

A numeric solution is a run of prices.  Each price occurrence becomes a
*slot*: the one dish at that price, or every dish sharing it when
several are tied.  Tied dishes are shown as one alternation slot
(``mixed fruit|unmixed fruit``) instead of multiplying the output into
one line per name choice.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from menusum.domain.exceptions import ValidationError
from menusum.domain.service.enumerator import NumericSolution

Slot = tuple[str, ...]
TextualSolution = tuple[Slot, ...]

NO_SOLUTION_MESSAGE = (
    "There is no combination of dishes that will be equal in cost to the target price."
)


@dataclass(frozen=True)
class SolutionReport:
    """Unique rendered solution lines for one group, in sorted order."""

    lines: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.lines)

    @property
    def found(self) -> bool:
        return bool(self.lines)


class SolutionFormatter:

    def __init__(self, item_separator: str = ",", choice_separator: str = "|") -> None:
        if not item_separator or not choice_separator:
            raise ValidationError("Separators cannot be empty")
        if item_separator == choice_separator:
            raise ValidationError(
                f"Item and choice separators must differ, both are {item_separator!r}"
            )
        self._item_separator = item_separator
        self._choice_separator = choice_separator

    def to_textual(
        self,
        solution: NumericSolution,
        lookup: Mapping[int, tuple[str, ...]],
    ) -> TextualSolution:
        """Replace every price in ``solution`` with the dish names at that price."""
        slots: list[Slot] = []
        for price in solution:
            names = lookup.get(price)
            if not names:
                raise ValidationError(f"No dish is priced at {price} cents")
            slots.append(tuple(names))
        return tuple(slots)

    def render(self, textual: TextualSolution) -> str:
        return self._item_separator.join(
            self._choice_separator.join(slot) for slot in textual
        )

    def format(
        self,
        solutions: Iterable[NumericSolution],
        lookup: Mapping[int, tuple[str, ...]],
    ) -> SolutionReport:
        """Name, deduplicate and sort ``solutions``.

        Duplicates are detected on the slot tuples rather than on the
        rendered text, so a dish name that happens to contain a separator
        cannot merge two different solutions.
        """
        unique: dict[TextualSolution, str] = {}
        for solution in solutions:
            textual = self.to_textual(solution, lookup)
            if textual not in unique:
                unique[textual] = self.render(textual)
        return SolutionReport(lines=tuple(sorted(unique.values())))

    @staticmethod
    def render_report(report: SolutionReport) -> list[str]:
        """Output lines for a report, ending with the solution count."""
        lines = list(report.lines) if report.found else [NO_SOLUTION_MESSAGE]
        lines.append(f"solutions found - {report.count}")
        return lines
