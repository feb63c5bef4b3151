"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from menusum.domain.exceptions import ValidationError

_CURRENCY_RE = re.compile(r"^\$(\d+)\.(\d{2})$")


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount held as integer cents.

    Prices are summed thousands of times during a search, so they never
    touch floating point: "$15.05" becomes 1505 and stays an int.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money cents must be an int, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents}"
            )

    @property
    def is_positive(self) -> bool:
        return self.cents > 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.cents // 100}.{self.cents % 100:02d}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def parse(text: str) -> Money:
        """Parse a strict ``$D.CC`` currency string."""
        match = _CURRENCY_RE.match(text.strip())
        if match is None:
            raise ValidationError(f"Invalid currency amount: {text!r}")
        dollars, cents = match.groups()
        return Money(int(dollars) * 100 + int(cents))

    @staticmethod
    def is_currency(text: str) -> bool:
        return _CURRENCY_RE.match(text) is not None
