"""
Core exception types raised by BEM grammar validation, conversion and the entity.

Provides typed exceptions for core-domain failures:
- GrammarError for BEM name/value character and shape violations.
- StructureError for representations with the wrong arity or field types.
- MutabilityError for mutations attempted on a frozen or final BemBase.
- BemTypeError for values that are not a BEM entity, object, string or vector.

Every exception carries the offending ``attribute`` (when known), a human-readable
``expected`` clause and the ``actual`` value that was supplied.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Boolean predicates (``is_valid_*``) never raise; ``ensure_*`` helpers and
      BemBase raise these types.

Examples:
    Catch a grammar failure raised by a fail-fast checker.

    >>> from bemkit.core.errors import GrammarError
    >>> from bemkit.core.validate import ensure_bem_block
    >>> try:
    ...     ensure_bem_block("1blk")
    ... except GrammarError as e:
    ...     msg = str(e)
    >>> "valid BEM name" in msg
    True
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "BemError",
    "GrammarError",
    "StructureError",
    "MutabilityError",
    "BemTypeError",
    "describe_value",
]

_MISSING: Any = object()


def describe_value(value: Any) -> str:
    """
    Render a value as ``<type name> (<repr>)`` for error messages.

    Examples:
        >>> describe_value(101)
        'int (101)'
        >>> describe_value("elt2-")
        "str ('elt2-')"
    """
    return f"{type(value).__name__} ({value!r})"


class BemError(Exception):
    """
    Base class for bemkit failures.

    Attributes:
        attribute (str | None): Name of the offending attribute (e.g. "blk"), if any.
        expected (str | None): Constraint the value had to satisfy.
        actual (Any): The rejected value; absent when not applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        attribute: str | None = None,
        expected: str | None = None,
        actual: Any = _MISSING,
    ) -> None:
        super().__init__(message)
        self.attribute = attribute
        self.expected = expected
        self.actual = None if actual is _MISSING else actual
        self.has_actual = actual is not _MISSING


class GrammarError(BemError, ValueError):
    """BEM name/value fails the character or shape rules (e.g. sibling dashes)."""


class StructureError(BemError, ValueError):
    """Object/string/vector representation has the wrong arity or field types."""


class MutabilityError(BemError, AttributeError):
    """Mutation attempted on a frozen or final BemBase without requesting a fresh copy."""


class BemTypeError(BemError, TypeError):
    """Value is not a BEM entity, object, string or vector."""
