"""
Pydantic v2 model of a BEM name for typed boundaries (settings files, JSON
payloads, fixtures) that want model validation instead of raw mappings.

Responsibilities
- Validate ``blk`` / ``elt`` / ``mod`` with the same grammar as the rest of bemkit.
- Bridge to the other representations (BEM object, string, BemBase).

Style
- Zero-IO (stdlib + pydantic only).
- Field validators delegate to ``bemkit.core.validate.ensure_*`` and raise
  GrammarError/StructureError, which pydantic surfaces as ``ValidationError``.

References
- grammar: src/bemkit/core/grammar.py
- errors: src/bemkit/core/errors.py
- tests: tests/core/test_bem_schema_model.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .convert import format_bem_string, to_bem_object
from .entity import BemBase
from .typing import BemObject, BemStructure
from .validate import ensure_bem_block, ensure_bem_element, ensure_bem_modifier

__all__ = [
    "BemModel",
]


class BemModel(BaseModel):
    """
    Immutable, validated BEM name.

    Attributes:
        blk (str): BEM block.
        elt (str | None): Optional BEM element.
        mod (tuple[str, ...] | None): Optional modifier ``(name,)`` or ``(name, value)``.

    Raises:
        pydantic.ValidationError: If any part breaks the BEM grammar or extra keys are given.

    Examples:
        >>> from bemkit.core.schema import BemModel
        >>> BemModel(blk="button", mod=["size", "xl"]).to_bem_string()
        'button--size_xl'
        >>> BemModel.from_structure("button__icon").elt
        'icon'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    blk: str
    elt: str | None = None
    mod: tuple[str, ...] | None = None

    @field_validator("blk", mode="before")
    @classmethod
    def _check_blk(cls, v: Any) -> str:
        return ensure_bem_block(v)

    @field_validator("elt", mode="before")
    @classmethod
    def _check_elt(cls, v: Any) -> str | None:
        if v is None:
            return v
        return ensure_bem_element(v)

    @field_validator("mod", mode="before")
    @classmethod
    def _check_mod(cls, v: Any) -> tuple[str, ...] | None:
        """
        Normalize the modifier to ``(name,)`` or ``(name, value)``.

        A bare string is read as a modifier name without value.
        """
        if v is None:
            return v
        if isinstance(v, str):
            v = (v,)
        return ensure_bem_modifier(v)

    @classmethod
    def from_structure(cls, value: BemStructure) -> BemModel:
        """Build a model from any BEM representation (entity, object, string or vector)."""
        obj = to_bem_object(value)
        return cls(blk=obj["blk"], elt=obj.get("elt"), mod=obj.get("mod"))

    def to_bem_object(self) -> BemObject:
        """BEM object with absent parts omitted."""
        return self.model_dump(exclude_none=True)  # type: ignore[return-value]

    def to_bem_string(self) -> str:
        return format_bem_string(self.blk, self.elt, self.mod)

    def to_entity(self, *, is_final: bool = False, is_frozen: bool = False) -> BemBase:
        return BemBase(self.to_bem_object(), is_final=is_final, is_frozen=is_frozen)
