"""
Lossless conversions between the BEM representations.

Every converter accepts a BemBase, a BEM object (mapping), a BEM string or a BEM
vector (list/tuple). Untrusted inputs (everything except BemBase) are validated
first with ``ensure_bem_structure``:

- a value of any other shape raises ``BemTypeError`` (a ``TypeError``);
- a representation with invalid content raises ``GrammarError`` or ``StructureError``.

Conversion rules
- ``to_bem_object``: BemBase -> ``{"blk", "elt", "mod"}`` with None preserved;
  vector/string -> dict with absent parts omitted; a mapping is returned as-is.
- ``to_bem_string``: ``blk[__elt][--modName[_modValue]]``; a string is returned as-is.
- ``to_bem_vector``: ``(blk, elt, mod)`` 3-tuple with None for absent parts; a
  list/tuple is returned as-is.

Modifiers produced by these converters are always tuples.

Examples
--------
>>> from bemkit.core.convert import to_bem_object, to_bem_string, to_bem_vector
>>> to_bem_string(["foo", "bar", ["fiz", "buz"]])
'foo__bar--fiz_buz'
>>> to_bem_object("foo__bar--fiz_buz")
{'blk': 'foo', 'elt': 'bar', 'mod': ('fiz', 'buz')}
>>> to_bem_vector({"blk": "foo", "mod": ["fiz"]})
('foo', None, ('fiz',))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, cast

from .constants import ELEMENT_DELIMITER, MODIFIER_DELIMITER, MODIFIER_VALUE_DELIMITER
from .typing import BemObject, BemString, BemStructure, BemVector
from .validate import BemStructureKind, bem_structure_kind, check_bem_modifier, ensure_bem_structure

__all__ = [
    "to_bem_object",
    "to_bem_string",
    "to_bem_vector",
    "format_bem_string",
]


def _structure_kind(value: Any) -> BemStructureKind:
    ensure_bem_structure(value)
    # ensure_bem_structure rejects untagged values
    return cast(BemStructureKind, bem_structure_kind(value))


def _normalize_modifier(mod: Any) -> tuple[str, ...] | None:
    if mod is None:
        return None
    return check_bem_modifier(mod).value


def format_bem_string(blk: str, elt: str | None = None, mod: Sequence[Any] | None = None) -> BemString:
    """
    Serialize already-validated parts into the canonical BEM string.

    Examples:
        >>> format_bem_string("foo", None, ("fiz",))
        'foo--fiz'
    """
    parts = [blk]
    if elt:
        parts.append(ELEMENT_DELIMITER + elt)
    if mod:
        parts.append(MODIFIER_DELIMITER + mod[0])
        mod_value = mod[1] if len(mod) > 1 else None
        if mod_value:
            parts.append(MODIFIER_VALUE_DELIMITER + mod_value)
    return "".join(parts)


def _string_to_object(value: str) -> BemObject:
    blk_and_elt, _, mod_part = value.partition(MODIFIER_DELIMITER)
    blk, _, elt = blk_and_elt.partition(ELEMENT_DELIMITER)
    obj: BemObject = {"blk": blk}
    if elt:
        obj["elt"] = elt
    if mod_part:
        obj["mod"] = tuple(mod_part.split(MODIFIER_VALUE_DELIMITER))
    return obj


def _vector_to_object(value: Sequence[Any]) -> BemObject:
    blk, elt, mod = (list(value) + [None, None])[:3]
    obj: BemObject = {"blk": blk}
    if elt is not None:
        obj["elt"] = elt
    if mod is not None:
        obj["mod"] = _normalize_modifier(mod)
    return obj


def _object_to_vector(value: Mapping[str, Any]) -> BemVector:
    return (value["blk"], value.get("elt"), _normalize_modifier(value.get("mod")))


_TO_OBJECT: dict[BemStructureKind, Callable[[Any], Any]] = {
    BemStructureKind.ENTITY: lambda v: v.to_bem_object(),
    BemStructureKind.OBJECT: lambda v: v,
    BemStructureKind.STRING: _string_to_object,
    BemStructureKind.VECTOR: _vector_to_object,
}

_TO_STRING: dict[BemStructureKind, Callable[[Any], str]] = {
    BemStructureKind.ENTITY: lambda v: v.to_bem_string(),
    BemStructureKind.OBJECT: lambda v: format_bem_string(v["blk"], v.get("elt"), v.get("mod")),
    BemStructureKind.STRING: lambda v: v,
    BemStructureKind.VECTOR: lambda v: format_bem_string(*(list(v) + [None, None])[:3]),
}

_TO_VECTOR: dict[BemStructureKind, Callable[[Any], Any]] = {
    BemStructureKind.ENTITY: lambda v: v.to_bem_vector(),
    BemStructureKind.OBJECT: _object_to_vector,
    BemStructureKind.STRING: lambda v: _object_to_vector(_string_to_object(v)),
    BemStructureKind.VECTOR: lambda v: v,
}


def to_bem_object(value: BemStructure) -> BemObject:
    """
    Convert a BEM representation to a BEM object.

    Args:
        value (BemStructure): BemBase, mapping, string or list/tuple.

    Returns:
        BemObject: For a BemBase all three keys are present (None when unset);
        for strings and vectors absent parts are omitted; mappings are returned as-is.

    Raises:
        BemTypeError: If value is not one of the accepted shapes.
        GrammarError | StructureError: If the representation is invalid.
    """
    return _TO_OBJECT[_structure_kind(value)](value)


def to_bem_string(value: BemStructure) -> BemString:
    """
    Convert a BEM representation to the canonical BEM string.

    A string argument is validated and returned unchanged.

    Raises:
        BemTypeError: If value is not one of the accepted shapes.
        GrammarError | StructureError: If the representation is invalid.
    """
    return _TO_STRING[_structure_kind(value)](value)


def to_bem_vector(value: BemStructure) -> BemVector:
    """
    Convert a BEM representation to a BEM vector ``(blk, elt, mod)``.

    A list/tuple argument is validated and returned unchanged.

    Raises:
        BemTypeError: If value is not one of the accepted shapes.
        GrammarError | StructureError: If the representation is invalid.
    """
    return _TO_VECTOR[_structure_kind(value)](value)
