"""Parsers that accept values from a fixed table or a fixed reference value.

Keys are compared strictly: an input matches a key only if it is of exactly
the same type and compares equal, so ``True``, ``1`` and ``1.0`` are distinct
keys. Objects without a custom ``__eq__`` match by identity.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Mapping
from typing import Any, TypeVar

from dataknobs_parsers.core import MessageSource, Parser, make_error
from dataknobs_parsers.paths import Path

K = TypeVar("K")
V = TypeVar("V")


def _strict_key(value: Hashable) -> tuple[type, Hashable]:
    return (type(value), value)


def _find(index: Mapping[tuple[type, Hashable], Any], input: Any) -> tuple[bool, Any]:
    # Unhashable inputs cannot be keys of the index.
    try:
        key = _strict_key(input)
        return key in index, index.get(key)
    except TypeError:
        return False, None


def lookup(table: Mapping[K, V], message: MessageSource | None = None) -> Parser[V]:
    """Create a parser that uses a mapping to look up output values.

    Presence of the key is what counts, so a key mapped to None is valid
    and returns None.

    Args:
        table: The mapping to use. It is indexed when the parser is created,
            so later changes to it are not seen.
        message: Optional message source overriding the default error

    Example:
        ```python
        error_codes = {
            404: Error.NOT_FOUND,
            418: Error.IM_A_TEAPOT,
            500: Error.INTERNAL_SERVER_ERROR,
        }

        lookup(error_codes)
        ```
    """
    index = {_strict_key(key): value for key, value in table.items()}

    def parse(input: Any, path: Path) -> V:
        found, output = _find(index, input)
        if not found:
            raise make_error(path, message, input, "is an unknown value")
        return output

    return parse


def one_of(values: Collection[K], message: MessageSource | None = None) -> Parser[K]:
    """Create a parser that accepts members of a collection.

    Example:
        ```python
        one_of({"debug", "info", "warning", "error"})
        ```
    """
    index = {_strict_key(value): True for value in values}

    def parse(input: Any, path: Path) -> K:
        found, _ = _find(index, input)
        if not found:
            raise make_error(path, message, input, "is an unknown value")
        return input

    return parse


def equals(value: V, message: MessageSource | None = None) -> Parser[V]:
    """Create a parser that accepts one specific value.

    Equality is strict: the input must be of exactly the same type as the
    reference value and compare equal to it. ``True`` therefore does not
    equal ``1``, ``1`` does not equal ``1.0`` and NaN equals nothing.

    Args:
        value: The accepted value
        message: Optional message source overriding the default error

    Example:
        ```python
        equals("v2", lambda input, path: f"{format_path(path)} must be v2, got {input!r}")
        ```
    """
    def parse(input: Any, path: Path) -> V:
        if type(input) is not type(value) or input != value:
            raise make_error(path, message, input, "is invalid")
        return input

    return parse
