"""
BemBase: a BEM name with controlled mutability.

A BemBase wraps one BEM name (block, optional element, optional modifier) and
tracks an explicit Mutability state:

| State   | is_frozen | is_final | Reachable via                          |
|---------|-----------|----------|----------------------------------------|
| MUTABLE | False     | False    | construction, ``unfreeze()``           |
| FROZEN  | True      | False    | construction, ``freeze()``             |
| FINAL   | True      | True     | construction only; never left          |

Mutations (``blk =``, ``set_blk()`` and friends) pass the mutability gate first
(final, then frozen) and grammar validation second. Passing ``fresh=True`` to a
``set_*`` method skips the gate: the change is applied to a detached copy with
the same state and the receiver is left untouched.

Examples
--------
>>> from bemkit.core.entity import BemBase
>>> b = BemBase("foo", is_frozen=True)
>>> b.set_blk("bar", fresh=True).blk, b.blk
('bar', 'foo')
>>> BemBase("foo--biz_101").mod
('biz', '101')
>>> str(BemBase(["foo", "bar", ["fiz", "buz"]]))
'foo__bar--fiz_buz'
"""

from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Any

from .convert import format_bem_string, to_bem_object
from .errors import MutabilityError
from .typing import BemObject, BemStructure, BemVector
from .validate import check_bem_block, check_bem_element, check_bem_modifier

__all__ = [
    "Mutability",
    "BemBase",
]

logger = logging.getLogger(__name__)


class Mutability(Enum):
    """Mutability state of a BemBase."""

    MUTABLE = "mutable"
    FROZEN = "frozen"
    FINAL = "final"


def _validated(attribute: str, value: Any) -> Any:
    context = f"Can not set '{attribute}' of BemBase"
    if attribute == "blk":
        return check_bem_block(value).unwrap(context)
    if value is None:
        return None
    if attribute == "elt":
        return check_bem_element(value).unwrap(context)
    if isinstance(value, str):
        value = (value,)
    return check_bem_modifier(value).unwrap(context)


class BemBase:
    """
    Mutable-by-default value type holding one BEM name.

    Args:
        initializer (BemStructure): BEM string, object, vector or another BemBase.
        is_final (bool): Freeze the instance forever.
        is_frozen (bool): Freeze the instance; ``unfreeze()`` can undo it.

    Raises:
        BemTypeError: If initializer is not a BEM representation.
        GrammarError | StructureError: If initializer is not a valid BEM name.

    Notes:
        Equality compares block, element and modifier and ignores the mutability
        state. Instances are unhashable.
    """

    __slots__ = ("_blk", "_elt", "_mod", "_state")

    def __init__(self, initializer: BemStructure, *, is_final: bool = False, is_frozen: bool = False) -> None:
        obj = to_bem_object(initializer)
        self._blk: str = obj["blk"]
        self._elt: str | None = obj.get("elt") or None
        mod = obj.get("mod")
        self._mod: tuple[str, ...] | None = None if mod is None else check_bem_modifier(mod).value
        if is_final:
            self._state = Mutability.FINAL
        elif is_frozen:
            self._state = Mutability.FROZEN
        else:
            self._state = Mutability.MUTABLE

    # ------------------------------------------------------------------
    # Parts
    # ------------------------------------------------------------------

    @property
    def blk(self) -> str:
        return self._blk

    @blk.setter
    def blk(self, value: str) -> None:
        self._assign("blk", value)

    @property
    def elt(self) -> str | None:
        return self._elt

    @elt.setter
    def elt(self, value: str | None) -> None:
        self._assign("elt", value)

    @property
    def mod(self) -> tuple[str, ...] | None:
        return self._mod

    @mod.setter
    def mod(self, value: Any) -> None:
        self._assign("mod", value)

    def set_blk(self, value: str, *, fresh: bool = False) -> BemBase:
        """
        Set the block in place and return self, or on a fresh copy when ``fresh`` is truthy.

        Raises:
            MutabilityError: If not fresh and the instance is final or frozen.
            GrammarError | StructureError: If value is not a valid BEM block.
        """
        return self._set("blk", value, fresh)

    def set_elt(self, value: str | None, *, fresh: bool = False) -> BemBase:
        """Like ``set_blk`` for the element; None removes it."""
        return self._set("elt", value, fresh)

    def set_mod(self, value: Any, *, fresh: bool = False) -> BemBase:
        """Like ``set_blk`` for the modifier; None removes it, a bare name means no value."""
        return self._set("mod", value, fresh)

    def _set(self, attribute: str, value: Any, fresh: bool) -> BemBase:
        if fresh:
            inst = self._derive(**{attribute: _validated(attribute, value)})
            logger.debug("Derived %s from %s by setting %s", inst, self, attribute)
            return inst
        self._assign(attribute, value)
        return self

    def _assign(self, attribute: str, value: Any) -> None:
        self._throw_when_is_final(attribute=attribute)._throw_when_is_frozen(attribute=attribute)
        setattr(self, f"_{attribute}", _validated(attribute, value))
        logger.debug("Set %s of BemBase to %r", attribute, getattr(self, f"_{attribute}"))

    def _derive(self, state: Mutability | None = None, **parts: Any) -> BemBase:
        inst = copy.copy(self)
        for attribute, value in parts.items():
            setattr(inst, f"_{attribute}", value)
        if state is not None:
            inst._state = state
        return inst

    # ------------------------------------------------------------------
    # Mutability
    # ------------------------------------------------------------------

    @property
    def mutability(self) -> Mutability:
        return self._state

    @property
    def is_final(self) -> bool:
        return self._state is Mutability.FINAL

    @property
    def is_frozen(self) -> bool:
        return self._state is not Mutability.MUTABLE

    def _throw_when_is_final(self, message: str | None = None, attribute: str | None = None) -> BemBase:
        if self.is_final:
            raise MutabilityError(
                message or "Instance is final and can not be changed",
                attribute=attribute,
                expected="a non-final instance",
            )
        return self

    def _throw_when_is_frozen(self, message: str | None = None, attribute: str | None = None) -> BemBase:
        if self.is_frozen:
            raise MutabilityError(
                message or "Instance is frozen and can not be changed",
                attribute=attribute,
                expected="an unfrozen instance",
            )
        return self

    def freeze(self) -> BemBase:
        """Freeze the instance; idempotent, a final instance stays final."""
        if self._state is Mutability.MUTABLE:
            self._state = Mutability.FROZEN
            logger.debug("Froze %s", self)
        return self

    def unfreeze(self) -> BemBase:
        """
        Make a frozen instance mutable again.

        Raises:
            MutabilityError: If the instance is final; its frozen state is permanent.
        """
        self._throw_when_is_final("Instance is frozen and that can not be undone because it is also final")
        if self._state is Mutability.FROZEN:
            self._state = Mutability.MUTABLE
            logger.debug("Unfroze %s", self)
        return self

    def clone(self) -> BemBase:
        """Return a mutable copy with the same block, element and modifier."""
        return self._derive(state=Mutability.MUTABLE)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_bem_object(self) -> BemObject:
        return {"blk": self._blk, "elt": self._elt, "mod": self._mod}

    def to_bem_string(self) -> str:
        return format_bem_string(self._blk, self._elt, self._mod)

    def to_bem_vector(self) -> BemVector:
        return (self._blk, self._elt, self._mod)

    def __str__(self) -> str:
        return self.to_bem_string()

    def __repr__(self) -> str:
        flags = {Mutability.FINAL: ", is_final=True", Mutability.FROZEN: ", is_frozen=True"}
        return f"{type(self).__name__}({self.to_bem_string()!r}{flags.get(self._state, '')})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BemBase):
            return NotImplemented
        return self.to_bem_vector() == other.to_bem_vector()

    __hash__ = None  # type: ignore[assignment]
