"""
Canonical BEM grammar and zero-IO predicates.

Defines the BEM naming rules used across bemkit and exposes the authoritative EBNF
(``bem.ebnf``) for the canonical string form ``blk[__elt][--modName[_modValue]]``.

Responsibilities
- Implement the BEM name / value character rules as pure predicates.
- Alias block, element and modifier-name predicates to the name rule, and the
  modifier-value predicate to the value rule.
- Load the packaged EBNF and check its delimiter productions against
  ``bemkit.core.constants`` at import time.

Grammar rules
-------------
- BEM name: non-empty; first character a letter; last character a letter or a
  digit; interior letters, digits or single dashes (no ``--``).
- BEM value: same as a name, but may start with a digit.

Downstream usage
----------------
- ``bemkit.core.validate`` builds result objects, descriptions and fail-fast
  checkers on top of these predicates.
- ``bemkit.core.entity.BemBase`` validates every mutation through
  ``bemkit.core.validate``.

Examples
--------
>>> from bemkit.core.grammar import is_valid_bem_name, is_valid_bem_value
>>> is_valid_bem_name("some--thing")
False
>>> is_valid_bem_name("name-that-ends-with-digit-1")
True
>>> is_valid_bem_value("2-value-that-ends-with-digit")
True
>>> is_valid_bem_name(42)
False
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from .constants import ELEMENT_DELIMITER, MODIFIER_DELIMITER, MODIFIER_VALUE_DELIMITER

__all__ = [
    "EBNF_GRAMMAR",
    "GrammarProduction",
    "ParsedGrammar",
    "PARSED_GRAMMAR",
    "is_valid_bem_name",
    "is_valid_bem_value",
    "is_valid_bem_block",
    "is_valid_bem_element",
    "is_valid_bem_modifier_name",
    "is_valid_bem_modifier_value",
]

_EBNF_PATH = Path(__file__).with_name("bem.ebnf")

EBNF_GRAMMAR: Final[str] = _EBNF_PATH.read_text(encoding="utf-8")


@dataclass(slots=True, frozen=True)
class GrammarProduction:
    """One ``name = expression ;`` rule of the EBNF with its quoted terminals in order."""

    name: str
    expression: str
    terminals: tuple[str, ...]

    @property
    def leading_terminal(self) -> str | None:
        return self.terminals[0] if self.terminals else None


@dataclass(slots=True, frozen=True)
class ParsedGrammar:
    """Container for parsed grammar productions."""

    productions: dict[str, GrammarProduction]

    def production(self, name: str) -> GrammarProduction:
        try:
            return self.productions[name]
        except KeyError as exc:
            raise KeyError(f"Unknown grammar production: {name}") from exc

    @classmethod
    def from_text(cls, text: str) -> ParsedGrammar:
        stripped = _COMMENT_RE.sub(" ", text)
        productions: dict[str, GrammarProduction] = {}
        for match in _RULE_RE.finditer(stripped):
            expression = " ".join(match.group(2).split())
            productions[match.group(1)] = GrammarProduction(
                name=match.group(1),
                expression=expression,
                terminals=tuple(_LITERAL_RE.findall(expression)),
            )
        return cls(productions=productions)


_COMMENT_RE = re.compile(r"\(\*.*?\*\)", re.DOTALL)
_RULE_RE = re.compile(r"(?ms)^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*;")
_LITERAL_RE = re.compile(r"\"([^\"]+)\"")


# ============================================================================
# Predicates (zero I/O)
# ============================================================================

_BEM_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_BEM_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_SIBLING_DASHES_RE: Final[re.Pattern[str]] = re.compile(r"-{2,}")


def is_valid_bem_name(value: Any) -> bool:
    """
    Check whether a value is a BEM name.

    Args:
      value (Any): Candidate value; anything other than ``str`` is rejected.

    Returns:
      bool: True for a non-empty alpha-numeric-dashed string that starts with a
      letter, ends with a letter or digit and has no sibling dashes.

    Examples:
      >>> is_valid_bem_name("name-with-dashes")
      True
      >>> is_valid_bem_name("a1-")
      False
    """
    if not isinstance(value, str):
        return False
    return bool(_BEM_NAME_RE.fullmatch(value)) and not _SIBLING_DASHES_RE.search(value)


def is_valid_bem_value(value: Any) -> bool:
    """
    Check whether a value is a BEM value (a BEM name that may start with a digit).

    Examples:
      >>> is_valid_bem_value("1")
      True
      >>> is_valid_bem_value("-1")
      False
    """
    if not isinstance(value, str):
        return False
    return bool(_BEM_VALUE_RE.fullmatch(value)) and not _SIBLING_DASHES_RE.search(value)


def is_valid_bem_block(value: Any) -> bool:
    """BEM block is just a BEM name."""
    return is_valid_bem_name(value)


def is_valid_bem_element(value: Any) -> bool:
    """BEM element is just a BEM name."""
    return is_valid_bem_name(value)


def is_valid_bem_modifier_name(value: Any) -> bool:
    """BEM modifier name is just a BEM name."""
    return is_valid_bem_name(value)


def is_valid_bem_modifier_value(value: Any) -> bool:
    """BEM modifier value is just a BEM value."""
    return is_valid_bem_value(value)


def _assert_delimiters_match_constants(grammar: ParsedGrammar) -> None:
    expected = {
        "element_part": ELEMENT_DELIMITER,
        "modifier_part": MODIFIER_DELIMITER,
        "modifier_value_part": MODIFIER_VALUE_DELIMITER,
    }
    issues = [
        f"{rule}: grammar has {grammar.production(rule).leading_terminal!r}, constants have {delim!r}"
        for rule, delim in expected.items()
        if grammar.production(rule).leading_terminal != delim
    ]
    if issues:
        raise ValueError("BEM grammar out of sync with constants: " + "; ".join(issues))


PARSED_GRAMMAR: Final[ParsedGrammar] = ParsedGrammar.from_text(EBNF_GRAMMAR)
_assert_delimiters_match_constants(PARSED_GRAMMAR)
