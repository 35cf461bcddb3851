"""Exception types for the parsers package.

Every parser reports expected invalidity by raising a ``ValidationError``
that carries the path of the offending value and a human readable message.
Any other exception escaping a parser indicates a programming defect.

Example:
    ```python
    from dataknobs_parsers import ValidationError, shape, string

    parser = shape({"name": string()})
    try:
        parser({"name": 42}, ())
    except ValidationError as e:
        logger.error(f"Error: {e}")
        # Error: "name" must be a string
        e.path
        # ('name',)
    ```
"""

from collections.abc import Sequence
from typing import Any, Dict

from dataknobs_parsers.paths import PathSegment


class ParsersError(Exception):
    """Base exception for the parsers package.

    Attributes:
        message: Human-readable error message
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = details or context or {}
        self.details = self.context


class ValidationError(ParsersError, TypeError):
    """Raised by parsers if a value is invalid.

    This is the only exception a parser raises for invalid input. Composite
    parsers let it propagate unchanged, so ``path`` always identifies the
    exact sub-value that failed rather than one of its ancestors.

    Attributes:
        path: The path at which the invalid value is located

    Example:
        ```python
        error = ValidationError(("config", "port"), '"config.port" must be an integer')
        str(error)
        # '"config.port" must be an integer'
        error.context
        # {'path': ('config', 'port')}
        ```
    """

    def __init__(self, path: Sequence[PathSegment], message: str):
        path = tuple(path)
        super().__init__(message, context={"path": path})
        self.path = path

    def __reduce__(self):
        return (type(self), (self.path, self.message))


__all__ = [
    "ParsersError",
    "ValidationError",
]
