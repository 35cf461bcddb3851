"""Leaf parsers checking the primitive kind of an input value."""

from __future__ import annotations

import math
import re
from numbers import Number
from re import Pattern as RegexPattern
from typing import Any
from urllib.parse import SplitResult, urlsplit, uses_netloc

from dataknobs_parsers.core import MessageSource, Parser, make_error
from dataknobs_parsers.paths import Path


def _check_bounds(min: Number | None, max: Number | None) -> None:
    if min is not None and max is not None and min > max:  # type: ignore[operator]
        raise ValueError(f"min ({min}) cannot be greater than max ({max})")


def _bounds_phrase(kind: str, min: Number | None, max: Number | None) -> str:
    if min is None:
        if max is None:
            return f"must be {kind}"
        return f"must be {kind} less than or equal to {max}"
    if max is None:
        return f"must be {kind} greater than or equal to {min}"
    return f"must be {kind} from {min} to {max}"


def _in_bounds(value: Any, min: Number | None, max: Number | None) -> bool:
    return (min is None or value >= min) and (max is None or value <= max)


def string() -> Parser[str]:
    """Create a parser that accepts all strings."""
    def parse(input: Any, path: Path) -> str:
        if not isinstance(input, str):
            raise make_error(path, None, input, "must be a string")
        return input

    return parse


def matches(pattern: str | RegexPattern[str], message: MessageSource | None = None) -> Parser[str]:
    """Create a parser that accepts all strings matching a regular expression.

    The pattern is searched anywhere in the string; anchor it with ``^`` and
    ``$`` to require a full match.

    Args:
        pattern: Regex pattern (string or compiled pattern)
        message: Optional message source overriding the default error

    Example:
        ```python
        matches(r"^[a-z]+$")
        ```
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    default = f"must be a string matching /{regex.pattern}/"

    def parse(input: Any, path: Path) -> str:
        if not isinstance(input, str) or regex.search(input) is None:
            raise make_error(path, message, input, default)
        return input

    return parse


def number(min: Number | None = None, max: Number | None = None) -> Parser[int | float]:
    """Create a parser that accepts all numbers excluding NaN.

    Booleans are not numbers. Infinities are accepted unless excluded by
    the bounds.

    Args:
        min: If specified, values must be greater than or equal to this
        max: If specified, values must be less than or equal to this

    Example:
        ```python
        number()  # All numbers excluding NaN
        number(0)  # All non-negative numbers
        number(None, 42)  # All numbers less than or equal to 42
        number(0, 42)  # All non-negative numbers less than or equal to 42
        ```
    """
    _check_bounds(min, max)
    phrase = _bounds_phrase("a number", min, max)

    def parse(input: Any, path: Path) -> int | float:
        if (
            not isinstance(input, (int, float))
            or isinstance(input, bool)
            or (isinstance(input, float) and math.isnan(input))
            or not _in_bounds(input, min, max)
        ):
            raise make_error(path, None, input, phrase)
        return input

    return parse


def integer(min: int | None = None, max: int | None = None) -> Parser[int]:
    """Create a parser that accepts all integers.

    Only ``int`` values are integers; booleans and integral floats such as
    ``42.0`` are rejected.

    Args:
        min: If specified, values must be greater than or equal to this
        max: If specified, values must be less than or equal to this

    Example:
        ```python
        integer()  # All integers
        integer(0)  # All non-negative integers
        integer(None, 42)  # All integers less than or equal to 42
        integer(0, 42)  # All non-negative integers less than or equal to 42
        ```
    """
    _check_bounds(min, max)
    phrase = _bounds_phrase("an integer", min, max)

    def parse(input: Any, path: Path) -> int:
        if not isinstance(input, int) or isinstance(input, bool) or not _in_bounds(input, min, max):
            raise make_error(path, None, input, phrase)
        return input

    return parse


def boolean() -> Parser[bool]:
    """Create a parser that accepts True or False."""
    def parse(input: Any, path: Path) -> bool:
        if not isinstance(input, bool):
            raise make_error(path, None, input, "must be a boolean")
        return input

    return parse


def url() -> Parser[SplitResult]:
    """Create a parser that converts absolute URL strings to ``SplitResult``.

    A URL must have a scheme. Schemes that use a network location, such as
    http, https and ftp, also require a host. Any port must be valid.

    Example:
        ```python
        url()("https://example.com/docs", ("homepage",)).hostname
        # 'example.com'
        ```
    """
    def parse(input: Any, path: Path) -> SplitResult:
        if not isinstance(input, str):
            raise make_error(path, None, input, "must be a valid URL")
        try:
            parts = urlsplit(input)
            # Accessing the port validates it.
            parts.port
        except ValueError:
            raise make_error(path, None, input, "must be a valid URL") from None
        needs_host = parts.scheme in uses_netloc and parts.scheme != "file"
        if not parts.scheme or (needs_host and not parts.hostname):
            raise make_error(path, None, input, "must be a valid URL")
        return parts

    return parse
