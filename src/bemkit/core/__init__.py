"""
Core package aggregator for BEM contracts (grammar, checkers, converters, entity, model).

## Contracts (single source of truth)
- Grammar: BEM name/value predicates and the canonical EBNF (`bem.ebnf`).
- Validate: one ValidationResult per rule, with description, boolean and fail-fast views.
- Convert: lossless conversions between BEM object, string and vector.
- Entity: `BemBase`, a BEM name with mutable / frozen / final states.
- Schema: `BemModel`, a pydantic model for typed boundaries.
- Errors: GrammarError, StructureError, MutabilityError, BemTypeError.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO (the EBNF ships as package data).
- Canonical string: `blk[__elt][--modName[_modValue]]`.
- Modifiers produced by bemkit are tuples: `(name,)` or `(name, value)`.

## Examples
```python
from bemkit.core import BemBase, to_bem_string, validate_bem_string

to_bem_string(["foo", "bar", ["fiz", "buz"]])  # 'foo__bar--fiz_buz'
validate_bem_string("blk__elt2-")  # "BEM string -- BEM element must be ... but it is str ('elt2-')"

b = BemBase("foo", is_frozen=True)
b.set_blk("bar", fresh=True).blk  # 'bar'; b.blk is still 'foo'
```
"""

from .constants import ELEMENT_DELIMITER, MODIFIER_DELIMITER, MODIFIER_VALUE_DELIMITER
from .convert import format_bem_string, to_bem_object, to_bem_string, to_bem_vector
from .entity import BemBase, Mutability
from .errors import BemError, BemTypeError, GrammarError, MutabilityError, StructureError
from .grammar import (
    EBNF_GRAMMAR,
    PARSED_GRAMMAR,
    is_valid_bem_block,
    is_valid_bem_element,
    is_valid_bem_modifier_name,
    is_valid_bem_modifier_value,
    is_valid_bem_name,
    is_valid_bem_value,
)
from .schema import BemModel
from .validate import (
    BemStructureKind,
    IssueKind,
    ValidationIssue,
    ValidationResult,
    bem_structure_kind,
    check_bem_block,
    check_bem_element,
    check_bem_modifier,
    check_bem_modifier_name,
    check_bem_modifier_value,
    check_bem_name,
    check_bem_object,
    check_bem_string,
    check_bem_structure,
    check_bem_value,
    check_bem_vector,
    ensure_bem_block,
    ensure_bem_element,
    ensure_bem_modifier,
    ensure_bem_modifier_name,
    ensure_bem_modifier_value,
    ensure_bem_name,
    ensure_bem_object,
    ensure_bem_string,
    ensure_bem_structure,
    ensure_bem_value,
    ensure_bem_vector,
    is_valid_bem_modifier,
    is_valid_bem_object,
    is_valid_bem_string,
    is_valid_bem_structure,
    is_valid_bem_vector,
    validate_bem_block,
    validate_bem_element,
    validate_bem_modifier,
    validate_bem_modifier_name,
    validate_bem_modifier_value,
    validate_bem_name,
    validate_bem_object,
    validate_bem_string,
    validate_bem_structure,
    validate_bem_value,
    validate_bem_vector,
)

__all__ = [
    "ELEMENT_DELIMITER",
    "MODIFIER_DELIMITER",
    "MODIFIER_VALUE_DELIMITER",
    "EBNF_GRAMMAR",
    "PARSED_GRAMMAR",
    # entity / model
    "BemBase",
    "Mutability",
    "BemModel",
    # errors
    "BemError",
    "BemTypeError",
    "GrammarError",
    "MutabilityError",
    "StructureError",
    # results
    "BemStructureKind",
    "IssueKind",
    "ValidationIssue",
    "ValidationResult",
    "bem_structure_kind",
    # converters
    "format_bem_string",
    "to_bem_object",
    "to_bem_string",
    "to_bem_vector",
    # predicates
    "is_valid_bem_name",
    "is_valid_bem_value",
    "is_valid_bem_block",
    "is_valid_bem_element",
    "is_valid_bem_modifier_name",
    "is_valid_bem_modifier_value",
    "is_valid_bem_modifier",
    "is_valid_bem_object",
    "is_valid_bem_string",
    "is_valid_bem_vector",
    "is_valid_bem_structure",
    # checkers
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
