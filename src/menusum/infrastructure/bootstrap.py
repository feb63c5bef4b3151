"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from menusum.application.dto import SolveOptions
from menusum.application.solve_menu import SolveMenuHandler
from menusum.domain.repository.menu_source import IssueReporter
from menusum.domain.service.formatter import SolutionFormatter
from menusum.infrastructure.parsing.text_menu_source import TextMenuSource

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(options: SolveOptions) -> None:
    logging.basicConfig(
        level=logging.INFO if options.verbose else logging.WARNING,
        format=_LOG_FORMAT,
        force=True,
    )


def solution_formatter(options: SolveOptions) -> SolutionFormatter:
    return SolutionFormatter(
        item_separator=options.item_separator,
        choice_separator=options.choice_separator,
    )


def menu_source(file_path: Path, reporter: IssueReporter) -> TextMenuSource:
    return TextMenuSource(file_path, reporter)


def solve_menu_handler(
    file_path: Path,
    options: SolveOptions,
    reporter: IssueReporter,
) -> SolveMenuHandler:
    return SolveMenuHandler(
        source=menu_source(file_path, reporter),
        formatter=solution_formatter(options),
    )
