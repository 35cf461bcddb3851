"""The parser contract and the basic combinators built on it.

A parser is any callable ``(input, path) -> output``. It validates ``input``,
optionally converts it and returns the result, or raises a
``ValidationError`` for the given path. Parsers hold no per-call state, so
they compose by plain function composition.

Example:
    ```python
    from dataknobs_parsers import integer, optional, shape, validate

    port = optional(integer(1, 65535), lambda: 8080)
    port(None, ("port",))
    # 8080

    if validate(config, shape({"port": port})):
        print("config is valid!")
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar, Union, overload

from dataknobs_parsers.exceptions import ValidationError
from dataknobs_parsers.paths import Path, format_path

logger = logging.getLogger(__name__)

O = TypeVar("O")

Parser = Callable[[Any, Path], O]
"""A callable that validates an input value found at a path and returns the output value."""

MessageSource = Union[str, Callable[[Any, Path], str]]
"""An error message, or a function ``(input, path) -> str`` generating one."""


def resolve_message(source: MessageSource | None, input: Any, path: Path) -> str | None:
    """Resolve a message source for a failed input.

    Args:
        source: Fixed message, message function or None
        input: The invalid input value
        path: Path of the invalid input value

    Returns:
        The message, or None if no source was supplied
    """
    if source is None:
        return None
    if isinstance(source, str):
        return source
    return source(input, path)


def validate(input: Any, parser: Parser[Any]) -> bool:
    """Validate an input value using a parser.

    Only ``ValidationError`` counts as invalid input. Any other exception
    raised by the parser is a defect and propagates to the caller.

    Args:
        input: The value to validate
        parser: The parser to use

    Returns:
        Whether the input value is valid

    Example:
        ```python
        if validate(value, number(0, 42)):
            print("input is valid!")
        ```
    """
    try:
        parser(input, ())
    except ValidationError as e:
        logger.debug("Rejected input: %s", e)
        return False
    return True


def passthrough() -> Parser[Any]:
    """Create a parser that returns its input as is.

    Example:
        ```python
        shape({
            "something": passthrough(),
            "message": string(),
        })
        ```
    """
    def parse(input: Any, path: Path) -> Any:
        return input

    return parse


def pipe(*parsers: Parser[Any]) -> Parser[Any]:
    """Create a parser that passes a value through multiple parsers in order.

    Every stage sees the same path, since all stages validate the same value
    under successive representations. The first failing stage aborts the
    chain. Without arguments the result is the identity parser.

    Example:
        ```python
        pipe(string(), iso_duration(), number(0, 60_000))
        ```
    """
    stages = tuple(parsers)
    for stage in stages:
        if not callable(stage):
            raise TypeError(f"pipe() stages must be callable, got {type(stage).__name__}")

    def parse(input: Any, path: Path) -> Any:
        value = input
        for stage in stages:
            value = stage(value, path)
        return value

    return parse


@overload
def optional(inner: Parser[O]) -> Parser[O | None]: ...


@overload
def optional(inner: Parser[O], get_default: Callable[[], O]) -> Parser[O]: ...


def optional(inner: Parser[O], get_default: Callable[[], O] | None = None) -> Parser[O | None]:
    """Create a parser that also accepts None.

    None is the only absent marker: a missing key in ``shape`` and an
    explicit None value (such as ``key: ~`` in YAML or ``null`` in JSON)
    are both accepted without invoking ``inner``.

    Args:
        inner: The parser to use if the input is not None
        get_default: Optional function returning the output for None input.
            The inner parser is never invoked for None input.

    Example:
        ```python
        optional(string())  # All strings and None
        optional(string(), lambda: "example")  # All strings, "example" for None
        ```
    """
    def parse(input: Any, path: Path) -> O | None:
        if input is None:
            return None if get_default is None else get_default()
        return inner(input, path)

    return parse


def make_error(path: Path, message: MessageSource | None, input: Any, default: str) -> ValidationError:
    """Build the error for a failed input.

    ``default`` is appended to the formatted path unless a message source
    overrides it.
    """
    resolved = resolve_message(message, input, path)
    if resolved is None:
        resolved = f"{format_path(path)} {default}"
    return ValidationError(path, resolved)
