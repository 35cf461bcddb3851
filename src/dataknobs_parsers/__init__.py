"""Composable parsers for validating and converting untyped data.

A parser is a callable ``(input, path) -> output`` that returns the
(possibly converted) input value or raises a ``ValidationError`` naming the
path of the invalid value. Parsers are built with small factory functions
and combined into parsers for nested structures:

- **Contract**: `validate`, `passthrough`, `format_path`, `ValidationError`
- **Combinators**: `pipe`, `optional`, `lookup`, `one_of`, `equals`,
  `array_of`, `shape`
- **Leaf parsers**: `string`, `matches`, `number`, `integer`, `boolean`,
  `url`, `iso_duration`

Example:
    ```python
    from dataknobs_parsers import (
        array_of, integer, iso_duration, optional, pipe, shape, string, url,
    )

    parse_config = shape({
        "name": string(),
        "endpoints": array_of(url()),
        "retries": optional(integer(0, 10), lambda: 3),
        "timeout": optional(iso_duration(), lambda: 30_000.0),
    })

    config = parse_config(raw_config, ("config",))
    ```
"""

from dataknobs_parsers.core import (
    MessageSource,
    Parser,
    optional,
    passthrough,
    pipe,
    resolve_message,
    validate,
)
from dataknobs_parsers.durations import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR,
    iso_duration,
)
from dataknobs_parsers.exceptions import ParsersError, ValidationError
from dataknobs_parsers.lookups import equals, lookup, one_of
from dataknobs_parsers.paths import Path, PathSegment, extend_path, format_path
from dataknobs_parsers.primitives import boolean, integer, matches, number, string, url
from dataknobs_parsers.structures import array_of, shape

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Contract
    "Parser",
    "MessageSource",
    "Path",
    "PathSegment",
    "validate",
    "passthrough",
    "resolve_message",
    "format_path",
    "extend_path",
    # Exceptions
    "ParsersError",
    "ValidationError",
    # Combinators
    "pipe",
    "optional",
    "lookup",
    "one_of",
    "equals",
    "array_of",
    "shape",
    # Leaf parsers
    "string",
    "matches",
    "number",
    "integer",
    "boolean",
    "url",
    "iso_duration",
    # Duration unit factors
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MS_PER_WEEK",
    "MS_PER_MONTH",
    "MS_PER_YEAR",
]
