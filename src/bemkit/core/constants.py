"""
Delimiters of the canonical BEM string form.

The canonical string is ``blk[__elt][--modName[_modValue]]``. These constants are
the single source of truth for the separators; the packaged ``bem.ebnf`` grammar
is checked against them when ``bemkit.core.grammar`` is imported.

Notes:
    - Zero-IO, stdlib-only.
    - Changing a delimiter is a wire-format change for every collaborator that
      uses BEM strings as CSS class names.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "ELEMENT_DELIMITER",
    "MODIFIER_DELIMITER",
    "MODIFIER_VALUE_DELIMITER",
]

# blk__elt
ELEMENT_DELIMITER: Final[str] = "__"

# blk--mod
MODIFIER_DELIMITER: Final[str] = "--"

# blk--mod_value
MODIFIER_VALUE_DELIMITER: Final[str] = "_"
