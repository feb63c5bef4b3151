"""Application service: Solve Menu use case.

Orchestrates the flow from a MenuSource through the enumerator and the
formatter.  Groups are solved one at a time, in input order, each with
its own candidate prices and name lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from menusum.application.dto import GroupReportDTO
from menusum.domain.model.menu import MenuGroup
from menusum.domain.repository.menu_source import MenuSource
from menusum.domain.service.enumerator import find_numeric_solutions
from menusum.domain.service.formatter import SolutionFormatter, SolutionReport

logger = logging.getLogger(__name__)


class SolveMenuHandler:

    def __init__(self, source: MenuSource, formatter: SolutionFormatter) -> None:
        self._source = source
        self._formatter = formatter

    def handle(self) -> list[GroupReportDTO]:
        """Solve every group in the source."""
        return list(self.iter_reports())

    def iter_reports(self) -> Iterator[GroupReportDTO]:
        """Lazily solve groups as the source yields them."""
        processed = 0
        for group in self._source.groups():
            processed += 1
            logger.info(
                "%s: processing data set combination %d in file "
                "(target %s at line %s, %d dish(es))",
                self._source.name,
                processed,
                group.target,
                group.line,
                len(group.dishes),
            )
            yield self.handle_group(group)
        logger.info("%s: %d data set(s) processed", self._source.name, processed)

    def handle_group(self, group: MenuGroup) -> GroupReportDTO:
        """Find and format every combination of dishes costing exactly the target.

        Steps:
        1. Reduce the dishes to distinct prices, largest first.
        2. Enumerate every exact-sum multiset of those prices.
        3. Map prices back to dish names, merging ties, and deduplicate.
        """
        values = group.candidate_values()
        solutions = find_numeric_solutions(group.target.cents, values)
        logger.debug(
            "target %s: %d numeric solution(s) over %d distinct price(s)",
            group.target,
            len(solutions),
            len(values),
        )
        report = self._formatter.format(solutions, group.name_lookup())
        return self._to_dto(group, report)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(group: MenuGroup, report: SolutionReport) -> GroupReportDTO:
        return GroupReportDTO(
            target=str(group.target),
            lines=list(report.lines),
            solution_count=report.count,
            output=SolutionFormatter.render_report(report),
        )
