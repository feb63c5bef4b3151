"""Abstract source of menu groups.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete text-file reader lives in the
infrastructure layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from menusum.domain.model.menu import MenuGroup


@dataclass(frozen=True)
class ParseIssue:
    """A problem found in the input that caused something to be skipped."""

    source: str
    line: int | None
    message: str

    def __str__(self) -> str:
        where = f"({self.line})" if self.line is not None else ""
        return f"{self.source}{where} ERROR: {self.message}"


IssueReporter = Callable[[ParseIssue], None]


class MenuSource(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable identifier, e.g. the file path."""

    @abstractmethod
    def groups(self) -> Iterator[MenuGroup]:
        """Yield every valid target/dish group in input order."""
