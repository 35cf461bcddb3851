"""Test utilities for parsers.

Example:
    ```python
    from dataknobs_parsers import number
    from dataknobs_parsers.testing import ParserTester

    def test_port():
        tester = ParserTester(number(1, 65535), '"test" must be a number from 1 to 65535')
        tester.invalid(0)
        tester.invalid("80")
        tester.valid(80)
    ```
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dataknobs_parsers.core import Parser
from dataknobs_parsers.exceptions import ValidationError
from dataknobs_parsers.paths import PathSegment

_SAME = object()


def strict_equal(actual: Any, expected: Any) -> bool:
    """Compare values by type and equality, recursing into lists, tuples and dicts.

    ``1``, ``1.0`` and ``True`` are all different values here.
    """
    if type(actual) is not type(expected):
        return False
    if isinstance(actual, (list, tuple)):
        return len(actual) == len(expected) and all(
            strict_equal(a, e) for a, e in zip(actual, expected)
        )
    if isinstance(actual, dict):
        return actual.keys() == expected.keys() and all(
            strict_equal(actual[key], expected[key]) for key in actual
        )
    return actual == expected


class ParserTester:
    """Assert how a parser treats valid and invalid inputs.

    Inputs are parsed at ``path``, so expected messages embed its formatted
    form (``"test"`` by default).

    Args:
        parser: The parser under test
        message: Expected message of errors raised for invalid inputs
        path: Path to parse inputs at
    """

    def __init__(self, parser: Parser[Any], message: str, path: Sequence[PathSegment] = ("test",)):
        self.parser = parser
        self.message = message
        self.path = tuple(path)

    def valid(self, input: Any, expected: Any = _SAME) -> Any:
        """Assert that ``input`` is valid and parses to ``expected``.

        Args:
            input: Input value
            expected: Expected output, the input itself if omitted

        Returns:
            The parser's output
        """
        if expected is _SAME:
            expected = input
        output = self.parser(input, self.path)
        if not strict_equal(output, expected):
            raise AssertionError(f"expected {expected!r} for {input!r}, got {output!r}")
        return output

    def invalid(self, input: Any, message: str | None = None) -> ValidationError:
        """Assert that ``input`` is rejected with ``message``.

        Args:
            input: Input value
            message: Expected message, the tester's default if omitted

        Returns:
            The raised error, for further assertions on its path
        """
        expected = self.message if message is None else message
        try:
            output = self.parser(input, self.path)
        except ValidationError as e:
            if e.message != expected:
                raise AssertionError(
                    f"expected message {expected!r} for {input!r}, got {e.message!r}"
                ) from e
            return e
        raise AssertionError(f"expected {input!r} to be invalid, got {output!r}")
