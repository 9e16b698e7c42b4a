"""
Configuration for bemkit.

Defines BemSettings, a frozen dataclass carrying the defaults applied when
entities are built from configuration (``BemBase(x, **settings.entity_options())``)
and the log level used by ``bemkit.logs.setup_logging``.

Precedence
- environment (``BEMKIT_*``) > TOML (``bemkit.toml`` or ``[tool.bemkit]`` in
  ``pyproject.toml``) > defaults.

Import DAG discipline
- Depends only on stdlib and bemkit.logs; bemkit.core never imports this module.

Notes
- Malformed values are ignored and the lower layer wins.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .logs import get_logger

__all__ = [
    "BemSettings",
]

logger = get_logger(__name__)

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bool(v: Any) -> bool | None:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        lo = v.strip().lower()
        if lo in _TRUE:
            return True
        if lo in _FALSE:
            return False
    return None


@dataclass(frozen=True)
class BemSettings:
    """
    Runtime settings for bemkit.

    Attributes:
        is_frozen (bool): Default ``is_frozen`` for entities built via ``entity_options()``.
        is_final (bool): Default ``is_final`` for entities built via ``entity_options()``.
        log_level (str): Level name used by ``bemkit.logs.setup_logging``.

    Examples:
        >>> from bemkit.config import BemSettings
        >>> BemSettings(is_frozen=True).entity_options()
        {'is_final': False, 'is_frozen': True}
    """

    is_frozen: bool = False
    is_final: bool = False
    log_level: str = "WARNING"

    def entity_options(self) -> dict[str, bool]:
        return {"is_final": self.is_final, "is_frozen": self.is_frozen}

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: BemSettings, cfg: dict[str, Any] | None) -> BemSettings:
        """Apply a loose config mapping onto BemSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        for key in ("is_frozen", "is_final"):
            if key in cfg:
                flag = _bool(cfg[key])
                if flag is None:
                    logger.debug("Ignoring malformed %s setting: %r", key, cfg[key])
                else:
                    s = replace(s, **{key: flag})

        if "log_level" in cfg:
            level = cfg["log_level"]
            if isinstance(level, str) and level.strip().upper() in _LEVELS:
                s = replace(s, log_level=level.strip().upper())
            else:
                logger.debug("Ignoring malformed log_level setting: %r", level)

        return s

    @classmethod
    def from_env(cls, base: BemSettings | None = None, prefix: str = "BEMKIT_") -> BemSettings:
        """
        Build BemSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - BEMKIT_IS_FROZEN (1/0/true/false/yes/no/on/off)
            - BEMKIT_IS_FINAL (1/0/true/false/yes/no/on/off)
            - BEMKIT_LOG_LEVEL (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("is_frozen", "is_final", "log_level"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> BemSettings:
        """
        Build BemSettings from a TOML file.

        Search order when `path` is None:
            1) ./bemkit.toml (with either a [bem] table or top-level keys)
            2) ./pyproject.toml under [tool.bemkit]

        Returns defaults if no file is present or readable.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.debug("Skipping unreadable TOML file %s: %s", p, exc)
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "bemkit.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("bemkit") if isinstance(tool, dict) else None
            elif isinstance(data.get("bem"), dict):
                cfg = data["bem"]
            else:
                cfg = data
            if cfg:
                logger.debug("Loaded bemkit settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> BemSettings:
        """
        Load BemSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (bemkit.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

