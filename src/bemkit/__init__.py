"""
bemkit: BEM (Block-Element-Modifier) name grammar, validators, converters and entity.

## Public API
- Grammar predicates and checkers: ``is_valid_*``, ``check_*``, ``validate_*``, ``ensure_*``.
- Converters: ``to_bem_object``, ``to_bem_string``, ``to_bem_vector``.
- BemBase: a BEM name with mutable / frozen / final states.
- BemModel: pydantic model of a BEM name.
- BemSettings: entity defaults and log level (env > TOML > defaults).
- setup_logging / get_logger: logging helpers.

## Import DAG discipline
- bemkit.core is zero-IO; bemkit.config and bemkit.logs sit on top of it.

## Examples
```python
from bemkit import BemBase, BemSettings

settings = BemSettings.load()
b = BemBase("button__icon--size_xl", **settings.entity_options())
b.to_bem_vector()  # ('button', 'icon', ('size', 'xl'))
```
"""

from __future__ import annotations

import logging

from .config import BemSettings
from .core import *  # noqa: F403
from .core import __all__ as _core_all
from .logs import get_logger, setup_logging

logging.getLogger("bemkit").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    *_core_all,
    "BemSettings",
    "get_logger",
    "setup_logging",
]
