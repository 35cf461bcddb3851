"""Parsers for arrays and objects with nested parsers.

Both parsers extend the path for every nested value they validate and let
the first nested ``ValidationError`` propagate untouched, so the reported
path always points at the innermost invalid value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from dataknobs_parsers.core import Parser, make_error
from dataknobs_parsers.paths import Path, extend_path

O = TypeVar("O")


def array_of(inner: Parser[O]) -> Parser[list[O]]:
    """Create a parser that accepts arrays.

    Lists and tuples are arrays; strings, bytes, mappings and sets are not.
    Elements are validated in index order and the path of each element is
    extended with its index.

    Args:
        inner: The parser to use for elements

    Returns:
        A parser returning a new list with the parsed elements

    Example:
        ```python
        array_of(string())
        ```
    """
    def parse(input: Any, path: Path) -> list[O]:
        if not isinstance(input, (list, tuple)):
            raise make_error(path, None, input, "must be an array")
        return [inner(element, extend_path(path, i)) for i, element in enumerate(input)]

    return parse


def shape(fields: Mapping[str, Parser[Any]], ignore_unknown: bool = False) -> Parser[dict[str, Any]]:
    """Create a parser that accepts mappings with specific keys.

    Declared fields are validated in declaration order. A missing key is
    passed to its field parser as None, so wrap the field parser in
    ``optional`` to make it optional. Keys that are not declared are
    rejected, in the input's own key order, once all declared fields are
    valid.

    Args:
        fields: Parsers for each supported key
        ignore_unknown: If True, unknown keys are dropped instead of rejected

    Returns:
        A parser returning a new dict holding exactly the declared fields

    Example:
        ```python
        shape({
            "foo": string(),
            "bar": number(0, 42),
        })
        ```
    """
    fields = dict(fields)

    def parse(input: Any, path: Path) -> dict[str, Any]:
        if not isinstance(input, Mapping):
            raise make_error(path, None, input, "must be an object")
        output = {
            name: parser(input.get(name), extend_path(path, name))
            for name, parser in fields.items()
        }
        if not ignore_unknown:
            for key in input:
                if key not in fields:
                    sub_path = extend_path(path, key)
                    raise make_error(sub_path, None, input[key], "is not supported")
        return output

    return parse
