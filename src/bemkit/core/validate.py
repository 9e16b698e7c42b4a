"""
Structural checkers and the BEM string grammar parser.

Every rule is implemented once, as a ``check_*`` function returning a
ValidationResult that carries either the validated value or a ValidationIssue
(kind + message + offending attribute/expected clause/actual value). The three
other calling styles are thin views over that result:

| Style       | Prefix        | Returns / raises                              |
|-------------|---------------|-----------------------------------------------|
| result      | ``check_``    | ValidationResult                              |
| description | ``validate_`` | ``None`` when valid, else the issue message   |
| boolean     | ``is_valid_`` | ``True`` / ``False``; never raises            |
| fail-fast   | ``ensure_``   | the validated value, else a BemError subclass |

Representations
- BEM object: mapping ``{"blk": ..., "elt": ..., "mod": ...}``; ``blk`` required.
- BEM string: ``blk[__elt][--modName[_modValue]]``.
- BEM vector: list/tuple ``(blk, elt?, mod?)``.
- BEM entity: ``bemkit.core.entity.BemBase`` (always valid by construction).

String parsing works right-to-left by delimiter: the modifier part (``--``) is
split off first, then the element part (``__``); whatever remains is the block.

Examples
--------
>>> from bemkit.core.validate import validate_bem_string, check_bem_modifier
>>> validate_bem_string("blk__elt--mod_val") is None
True
>>> validate_bem_string("blk--mod1--mod2_2")
'BEM string -- can have only one modifier but it has 2 of them (mod1, mod2_2)'
>>> check_bem_modifier(["fiz", None]).value
('fiz',)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from .constants import ELEMENT_DELIMITER, MODIFIER_DELIMITER, MODIFIER_VALUE_DELIMITER
from .errors import BemError, BemTypeError, GrammarError, StructureError, describe_value
from .grammar import (
    is_valid_bem_block,
    is_valid_bem_element,
    is_valid_bem_modifier_name,
    is_valid_bem_modifier_value,
    is_valid_bem_name,
    is_valid_bem_value,
)

__all__ = [
    "IssueKind",
    "ValidationIssue",
    "ValidationResult",
    "BemStructureKind",
    "bem_structure_kind",
    # results
    "check_bem_name",
    "check_bem_value",
    "check_bem_block",
    "check_bem_element",
    "check_bem_modifier_name",
    "check_bem_modifier_value",
    "check_bem_modifier",
    "check_bem_object",
    "check_bem_string",
    "check_bem_vector",
    "check_bem_structure",
    # descriptions
    "validate_bem_name",
    "validate_bem_value",
    "validate_bem_block",
    "validate_bem_element",
    "validate_bem_modifier_name",
    "validate_bem_modifier_value",
    "validate_bem_modifier",
    "validate_bem_object",
    "validate_bem_string",
    "validate_bem_vector",
    "validate_bem_structure",
    # booleans
    "is_valid_bem_modifier",
    "is_valid_bem_object",
    "is_valid_bem_string",
    "is_valid_bem_vector",
    "is_valid_bem_structure",
    # fail-fast
    "ensure_bem_name",
    "ensure_bem_value",
    "ensure_bem_block",
    "ensure_bem_element",
    "ensure_bem_modifier_name",
    "ensure_bem_modifier_value",
    "ensure_bem_modifier",
    "ensure_bem_object",
    "ensure_bem_string",
    "ensure_bem_vector",
    "ensure_bem_structure",
]

T = TypeVar("T")

NAME_EXPECTED = (
    "a valid BEM name (letters, digits and single dashes, "
    "starting with a letter and ending with a letter or a digit)"
)
VALUE_EXPECTED = (
    "a valid BEM value (letters, digits and single dashes, "
    "starting and ending with a letter or a digit)"
)


class IssueKind(Enum):
    """Category of a validation failure; selects the exception raised by ``ensure_*``."""

    GRAMMAR = "grammar"
    STRUCTURE = "structure"
    TYPE = "type"


_EXCEPTIONS: dict[IssueKind, type[BemError]] = {
    IssueKind.GRAMMAR: GrammarError,
    IssueKind.STRUCTURE: StructureError,
    IssueKind.TYPE: BemTypeError,
}


@dataclass(slots=True, frozen=True)
class ValidationIssue:
    """
    Structured description of one validation failure.

    Attributes:
        kind (IssueKind): Failure category.
        message (str): Human-readable description.
        attribute (str | None): Offending attribute ("blk", "elt", "mod"), when known.
        expected (str | None): Constraint the value had to satisfy.
        actual (Any): The rejected value.
    """

    kind: IssueKind
    message: str
    attribute: str | None = None
    expected: str | None = None
    actual: Any = None

    def within(self, context: str, attribute: str | None = None) -> ValidationIssue:
        """Return a copy whose message is prefixed with ``context`` (``"<context> -- <message>"``)."""
        return replace(
            self,
            message=f"{context} -- {self.message}",
            attribute=attribute if attribute is not None else self.attribute,
        )

    def to_exception(self) -> BemError:
        return _EXCEPTIONS[self.kind](
            self.message, attribute=self.attribute, expected=self.expected, actual=self.actual
        )


@dataclass(slots=True, frozen=True)
class ValidationResult(Generic[T]):
    """
    Either a validated value or the issue explaining why it is invalid.

    Attributes:
        value (T): Validated (possibly normalized) value, or the rejected input.
        issue (ValidationIssue | None): None on success.
    """

    value: T
    issue: ValidationIssue | None = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @property
    def error(self) -> str | None:
        return None if self.issue is None else self.issue.message

    def unwrap(self, context: str | None = None) -> T:
        """
        Return the validated value or raise the exception mapped from the issue kind.

        Args:
            context (str | None): Optional prefix for the error message.

        Raises:
            GrammarError | StructureError | BemTypeError: When the result is a failure.
        """
        if self.issue is None:
            return self.value
        issue = self.issue if context is None else self.issue.within(context)
        raise issue.to_exception()


def _failure(
    kind: IssueKind,
    actual: Any,
    *,
    what: str,
    expected: str,
    attribute: str | None = None,
) -> ValidationResult[Any]:
    return ValidationResult(
        actual,
        ValidationIssue(
            kind=kind,
            message=f"{what} must be {expected} but it is {describe_value(actual)}",
            attribute=attribute,
            expected=expected,
            actual=actual,
        ),
    )


def _issue(kind: IssueKind, actual: Any, message: str, **fields: Any) -> ValidationResult[Any]:
    return ValidationResult(actual, ValidationIssue(kind=kind, message=message, actual=actual, **fields))


def _check_part(
    value: Any,
    predicate: Callable[[Any], bool],
    *,
    what: str,
    expected: str,
    attribute: str | None,
) -> ValidationResult[Any]:
    if predicate(value):
        return ValidationResult(value)
    # A string with bad characters breaks the grammar; anything else is the wrong field type.
    kind = IssueKind.GRAMMAR if isinstance(value, str) else IssueKind.STRUCTURE
    return _failure(kind, value, what=what, expected=expected, attribute=attribute)


# ============================================================================
# Names and values
# ============================================================================


def check_bem_name(value: Any, attribute: str | None = None) -> ValidationResult[str]:
    return _check_part(value, is_valid_bem_name, what="BEM name", expected=NAME_EXPECTED, attribute=attribute)


def check_bem_value(value: Any, attribute: str | None = None) -> ValidationResult[str]:
    return _check_part(value, is_valid_bem_value, what="BEM value", expected=VALUE_EXPECTED, attribute=attribute)


def check_bem_block(value: Any, attribute: str | None = "blk") -> ValidationResult[str]:
    return _check_part(value, is_valid_bem_block, what="BEM block", expected=NAME_EXPECTED, attribute=attribute)


def check_bem_element(value: Any, attribute: str | None = "elt") -> ValidationResult[str]:
    return _check_part(
        value, is_valid_bem_element, what="BEM element", expected=NAME_EXPECTED, attribute=attribute
    )


def check_bem_modifier_name(value: Any, attribute: str | None = "mod") -> ValidationResult[str]:
    return _check_part(
        value,
        is_valid_bem_modifier_name,
        what="BEM modifier's name",
        expected=NAME_EXPECTED,
        attribute=attribute,
    )


def check_bem_modifier_value(value: Any, attribute: str | None = "mod") -> ValidationResult[str]:
    return _check_part(
        value,
        is_valid_bem_modifier_value,
        what="BEM modifier's value",
        expected=VALUE_EXPECTED,
        attribute=attribute,
    )


def check_bem_modifier(value: Any) -> ValidationResult[tuple[str, ...]]:
    """
    Check a BEM modifier: a 1-2 item list/tuple of a required name and an optional value.

    Returns:
        ValidationResult: On success the value is normalized to ``(name,)`` or
        ``(name, value)``; a ``None`` value is dropped.

    Examples:
        >>> check_bem_modifier(("size", "xl")).value
        ('size', 'xl')
        >>> check_bem_modifier(["1"]).error.startswith("BEM modifier's name must be")
        True
    """
    if not isinstance(value, (list, tuple)):
        return _failure(
            IssueKind.STRUCTURE,
            value,
            what="BEM modifier",
            expected="a list or tuple of a required BEM modifier name and an optional BEM modifier value",
            attribute="mod",
        )
    if not 1 <= len(value) <= 2:
        return _issue(
            IssueKind.STRUCTURE,
            value,
            f"BEM modifier must have 1 or 2 items (name and optional value) but it has {len(value)}",
            attribute="mod",
            expected="1 or 2 items",
        )

    name_result = check_bem_modifier_name(value[0])
    if not name_result.ok:
        return ValidationResult(value, name_result.issue)

    mod_value = value[1] if len(value) == 2 else None
    if mod_value is None:
        return ValidationResult((value[0],))

    value_result = check_bem_modifier_value(mod_value)
    if not value_result.ok:
        return ValidationResult(value, value_result.issue)
    return ValidationResult((value[0], mod_value))


# ============================================================================
# Structures
# ============================================================================


class BemStructureKind(Enum):
    """Tag of a BEM representation."""

    ENTITY = "entity"
    OBJECT = "object"
    STRING = "string"
    VECTOR = "vector"


def bem_structure_kind(value: Any) -> BemStructureKind | None:
    """
    Tag a value with the BEM representation it has the shape of, or None.

    Only the outer shape is inspected; the content is not validated.

    Examples:
        >>> bem_structure_kind("blk__elt")
        <BemStructureKind.STRING: 'string'>
        >>> bem_structure_kind(42) is None
        True
    """
    from .entity import BemBase

    if isinstance(value, BemBase):
        return BemStructureKind.ENTITY
    if isinstance(value, str):
        return BemStructureKind.STRING
    if isinstance(value, Mapping):
        return BemStructureKind.OBJECT
    if isinstance(value, (list, tuple)):
        return BemStructureKind.VECTOR
    return None


def _check_parts(structure: str, blk: Any, elt: Any, mod: Any) -> ValidationIssue | None:
    context = f"BEM {structure}"
    result = check_bem_block(blk)
    if not result.ok:
        return result.issue.within(context)
    if elt is not None:
        result = check_bem_element(elt)
        if not result.ok:
            return result.issue.within(context)
    if mod is not None:
        result = check_bem_modifier(mod)
        if not result.ok:
            return result.issue.within(context)
    return None


def check_bem_object(value: Any) -> ValidationResult[Any]:
    """
    Check a BEM object: a mapping with a valid ``blk`` and optional ``elt`` / ``mod``.

    ``elt`` and ``mod`` may be absent or None. Extra keys are ignored.

    Examples:
        >>> check_bem_object({"blk": "blk", "elt": "elt", "mod": ["modNam", "modVal"]}).ok
        True
        >>> check_bem_object({"blk": "blk", "elt": 101}).issue.attribute
        'elt'
    """
    if not isinstance(value, Mapping):
        return _failure(
            IssueKind.TYPE, value, what="BEM object", expected="a mapping with a 'blk' key"
        )
    if "blk" not in value:
        return _issue(
            IssueKind.STRUCTURE,
            value,
            "BEM object -- required 'blk' attribute is missing",
            attribute="blk",
            expected="a 'blk' key",
        )
    issue = _check_parts("object", value.get("blk"), value.get("elt"), value.get("mod"))
    return ValidationResult(value, issue)


def check_bem_vector(value: Any) -> ValidationResult[Any]:
    """
    Check a BEM vector: a list/tuple ``(blk, elt?, mod?)`` of one to three items.

    ``elt`` and ``mod`` positions may hold None.
    """
    if not isinstance(value, (list, tuple)):
        return _failure(
            IssueKind.TYPE, value, what="BEM vector", expected="a list or tuple (blk, elt?, mod?)"
        )
    if not 1 <= len(value) <= 3:
        return _issue(
            IssueKind.STRUCTURE,
            value,
            f"BEM vector must have 1 to 3 items (block, element, modifier) but it has {len(value)}",
            expected="1 to 3 items",
        )
    blk, elt, mod = (list(value) + [None, None])[:3]
    return ValidationResult(value, _check_parts("vector", blk, elt, mod))


def check_bem_string(value: Any) -> ValidationResult[Any]:
    """
    Parse and check a BEM string ``blk[__elt][--modName[_modValue]]``.

    Parsing advances from the end of the string:

    1. Modifier part: at most one ``--`` segment; split on ``_`` into a name and an
       optional value. Empty pieces are checked like any other, so ``blk--mod_``
       and ``blk--mod__val`` are rejected.
    2. Element part: at most one ``__`` segment.
    3. Block part: whatever remains.

    Examples:
        >>> check_bem_string("blk__elt1__elt2__elt3").error
        'BEM string -- can have only one element but it has 3 of them (elt1, elt2, elt3)'
        >>> check_bem_string("blk--mod_a_b").error
        'BEM string -- modifier can have only one value but it has 2 of them (a, b)'
    """
    if not isinstance(value, str):
        return _failure(IssueKind.TYPE, value, what="BEM string", expected="a string")

    def fail(message: str, kind: IssueKind = IssueKind.STRUCTURE, **fields: Any) -> ValidationResult[Any]:
        return _issue(kind, value, f"BEM string -- {message}", **fields)

    if not value.strip():
        return fail("must have at least block part", attribute="blk")

    parts = value.split(MODIFIER_DELIMITER)
    mod_parts = parts[1:]
    if len(mod_parts) > 1:
        return fail(
            f"can have only one modifier but it has {len(mod_parts)} of them ({', '.join(mod_parts)})",
            attribute="mod",
        )

    if mod_parts:
        if not mod_parts[0].strip():
            return fail("modifier part must have a name", attribute="mod")
        pieces = mod_parts[0].split(MODIFIER_VALUE_DELIMITER)
        if len(pieces) > 2:
            return fail(
                f"modifier can have only one value but it has {len(pieces) - 1} of them "
                f"({', '.join(pieces[1:])})",
                attribute="mod",
            )
        result = check_bem_modifier_name(pieces[0])
        if not result.ok:
            return ValidationResult(value, result.issue.within("BEM string"))
        if len(pieces) == 2:
            result = check_bem_modifier_value(pieces[1])
            if not result.ok:
                return ValidationResult(value, result.issue.within("BEM string"))

    parts = parts[0].split(ELEMENT_DELIMITER)
    elt_parts = parts[1:]
    if len(elt_parts) > 1:
        return fail(
            f"can have only one element but it has {len(elt_parts)} of them ({', '.join(elt_parts)})",
            attribute="elt",
        )
    if elt_parts:
        result = check_bem_element(elt_parts[0])
        if not result.ok:
            return ValidationResult(value, result.issue.within("BEM string"))

    result = check_bem_block(parts[0])
    if not result.ok:
        return ValidationResult(value, result.issue.within("BEM string"))
    return ValidationResult(value)


_STRUCTURE_CHECKERS: dict[BemStructureKind, Callable[[Any], ValidationResult[Any]]] = {
    BemStructureKind.ENTITY: ValidationResult,
    BemStructureKind.OBJECT: check_bem_object,
    BemStructureKind.STRING: check_bem_string,
    BemStructureKind.VECTOR: check_bem_vector,
}


def check_bem_structure(value: Any) -> ValidationResult[Any]:
    """
    Check any BEM representation: entity, object, string or vector.

    Entities are valid by construction and pass through unchecked; any other
    shape yields a TYPE issue.
    """
    kind = bem_structure_kind(value)
    if kind is None:
        return _failure(
            IssueKind.TYPE,
            value,
            what="BEM structure",
            expected="a BemBase, BEM object (mapping), BEM string or BEM vector (list/tuple)",
        )
    return _STRUCTURE_CHECKERS[kind](value)


# ============================================================================
# Description variants: None when valid, else the issue message. Never raise.
# ============================================================================


def validate_bem_name(value: Any) -> str | None:
    return check_bem_name(value).error


def validate_bem_value(value: Any) -> str | None:
    return check_bem_value(value).error


def validate_bem_block(value: Any) -> str | None:
    return check_bem_block(value).error


def validate_bem_element(value: Any) -> str | None:
    return check_bem_element(value).error


def validate_bem_modifier_name(value: Any) -> str | None:
    return check_bem_modifier_name(value).error


def validate_bem_modifier_value(value: Any) -> str | None:
    return check_bem_modifier_value(value).error


def validate_bem_modifier(value: Any) -> str | None:
    return check_bem_modifier(value).error


def validate_bem_object(value: Any) -> str | None:
    return check_bem_object(value).error


def validate_bem_string(value: Any) -> str | None:
    """
    Describe why ``value`` is not a valid BEM string, or return None when it is.

    Examples:
        >>> validate_bem_string("   ")
        'BEM string -- must have at least block part'
        >>> "elt2-" in validate_bem_string("blk__elt2-")
        True
    """
    return check_bem_string(value).error


def validate_bem_vector(value: Any) -> str | None:
    return check_bem_vector(value).error


def validate_bem_structure(value: Any) -> str | None:
    return check_bem_structure(value).error


# ============================================================================
# Boolean predicates for composite representations. Never raise.
# ============================================================================


def is_valid_bem_modifier(value: Any) -> bool:
    return check_bem_modifier(value).ok


def is_valid_bem_object(value: Any) -> bool:
    return check_bem_object(value).ok


def is_valid_bem_string(value: Any) -> bool:
    return check_bem_string(value).ok


def is_valid_bem_vector(value: Any) -> bool:
    return check_bem_vector(value).ok


def is_valid_bem_structure(value: Any) -> bool:
    return check_bem_structure(value).ok


# ============================================================================
# Fail-fast variants: return the validated value or raise.
# ============================================================================


def ensure_bem_name(value: Any) -> str:
    return check_bem_name(value).unwrap()


def ensure_bem_value(value: Any) -> str:
    return check_bem_value(value).unwrap()


def ensure_bem_block(value: Any) -> str:
    return check_bem_block(value).unwrap()


def ensure_bem_element(value: Any) -> str:
    return check_bem_element(value).unwrap()


def ensure_bem_modifier_name(value: Any) -> str:
    return check_bem_modifier_name(value).unwrap()


def ensure_bem_modifier_value(value: Any) -> str:
    return check_bem_modifier_value(value).unwrap()


def ensure_bem_modifier(value: Any) -> tuple[str, ...]:
    return check_bem_modifier(value).unwrap()


def ensure_bem_object(value: Any) -> Any:
    return check_bem_object(value).unwrap()


def ensure_bem_string(value: Any) -> str:
    return check_bem_string(value).unwrap()


def ensure_bem_vector(value: Any) -> Any:
    return check_bem_vector(value).unwrap()


def ensure_bem_structure(value: Any) -> Any:
    return check_bem_structure(value).unwrap()
