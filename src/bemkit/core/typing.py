"""
Lightweight typing aliases for the BEM representations.

This module contains no runtime logic and is zero-IO.

Notes:
    - BemModifier values produced by bemkit are tuples; lists are accepted on input.
    - BemObject is a TypedDict: ``blk`` is required, ``elt`` and ``mod`` may be
      absent or None.

Examples:
    >>> from bemkit.core.typing import BemObject, BemVector
    >>> obj: BemObject = {"blk": "button", "mod": ("size", "xl")}
    >>> vec: BemVector = ("button", None, ("size", "xl"))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypedDict, Union

if TYPE_CHECKING:
    from .entity import BemBase

__all__ = [
    "BemName",
    "BemValue",
    "BemBlock",
    "BemElement",
    "BemModifierName",
    "BemModifierValue",
    "BemModifier",
    "BemObject",
    "BemString",
    "BemVector",
    "BemStructure",
]

BemName = str
BemValue = str
BemBlock = BemName
BemElement = BemName
BemModifierName = BemName
BemModifierValue = BemValue

# (name,) or (name, value)
BemModifier = Union[tuple[str], tuple[str, Union[str, None]], Sequence[Any]]

BemString = str

# (blk,), (blk, elt) or (blk, elt, mod); elt/mod may be None.
BemVector = Sequence[Any]


class _BemObjectRequired(TypedDict):
    blk: BemBlock


class BemObject(_BemObjectRequired, total=False):
    elt: BemElement | None
    mod: BemModifier | None


BemStructure = Union["BemBase", BemObject, BemString, BemVector]
