"""ISO 8601 duration parsing.

Durations are converted to milliseconds with fixed factors per unit, not
calendar arithmetic: a month is always 30 days and a year always 365 days.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from dataknobs_parsers.core import Parser, make_error
from dataknobs_parsers.paths import Path

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY
MS_PER_MONTH = 30 * MS_PER_DAY
MS_PER_YEAR = 365 * MS_PER_DAY

UNIT_FACTORS = {
    "years": MS_PER_YEAR,
    "months": MS_PER_MONTH,
    "weeks": MS_PER_WEEK,
    "days": MS_PER_DAY,
    "hours": MS_PER_HOUR,
    "minutes": MS_PER_MINUTE,
    "seconds": MS_PER_SECOND,
}


def _element(designator: str, name: str) -> str:
    # A fraction is only allowed on the last component of the duration.
    return rf"(?:(?P<{name}>[0-9]*[,.][0-9]+(?={designator}T?\Z)|[0-9]+){designator})?"


ISO_DURATION_REGEXP = re.compile(
    "".join([
        r"(?P<negative>-)?P",
        _element("Y", "years"),
        _element("M", "months"),
        _element("W", "weeks"),
        _element("D", "days"),
        r"(?:T",
        _element("H", "hours"),
        _element("M", "minutes"),
        _element("S", "seconds"),
        r")?",
    ])
)

# Well formed according to the grammar above, but without any component.
EMPTY_DURATIONS = frozenset({"P", "PT", "-P", "-PT"})


def _parse_element(value: str | None) -> Decimal:
    return Decimal(0) if value is None else Decimal(value.replace(",", "."))


def iso_duration() -> Parser[float]:
    """Create a parser that converts ISO 8601 durations to milliseconds.

    Note, that this parser uses fixed factors for each unit. Components are
    summed exactly before the result is converted to a float.

    Example:
        ```python
        iso_duration()("PT1M30S", ("timeout",))
        # 90000.0
        iso_duration()("-P1D", ("offset",))
        # -86400000.0
        ```
    """
    def parse(input: Any, path: Path) -> float:
        if not isinstance(input, str) or input in EMPTY_DURATIONS:
            raise make_error(path, None, input, "must be a valid ISO 8601 duration")

        match = ISO_DURATION_REGEXP.fullmatch(input)
        if match is None:
            raise make_error(path, None, input, "must be a valid ISO 8601 duration")

        total = sum(
            (_parse_element(match.group(name)) * factor for name, factor in UNIT_FACTORS.items()),
            Decimal(0),
        )
        if match.group("negative"):
            total = -total
        return float(total)

    return parse
