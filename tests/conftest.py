"""Pytest configuration and fixtures for parser tests."""

import pytest

from dataknobs_parsers import ValidationError


def _number_to_string(input, path):
    if not isinstance(input, (int, float)) or isinstance(input, bool):
        raise ValidationError(path, "test")
    return f"test{input}"


@pytest.fixture
def number_to_string():
    """Parser converting numbers to strings, failing with the bare message "test"."""
    return _number_to_string


@pytest.fixture
def recording_parser():
    """Factory for parsers recording the inputs and paths they were called with."""

    def _make(output=None):
        calls = []

        def parse(input, path):
            calls.append((input, path))
            return input if output is None else output

        parse.calls = calls
        return parse

    return _make
