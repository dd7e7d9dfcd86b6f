"""Layered TOML configuration with typed dataclass mapping.

Priority stack (highest wins):
    1. Hardcoded defaults (MdBlocksConfig())
    2. config/default.toml (bundled)
    3. ~/.config/mdblocks/config.toml (user config)
    4. CLI overrides (dot-notation)
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

_VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})
_VALID_INDENT_MODES = frozenset({"rendered", "raw"})


def _require_type(owner: object, name: str, expected: type) -> None:
    value = getattr(owner, name)
    # bool is an int subclass; "true" must not pass as a column number.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ValueError(
            f"{name} must be of type {expected.__name__}, got {type(value).__name__} {value!r}"
        )


# ---------------------------------------------------------------------------
# Typed config tree — all frozen, slots for memory efficiency
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GeneralConfig:
    """Top-level general settings."""

    log_level: str = "warning"

    def __post_init__(self) -> None:
        _require_type(self, "log_level", str)
        if self.log_level.lower() not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_VALID_LOG_LEVELS)}, got {self.log_level!r}"
            )


@dataclass(frozen=True, slots=True)
class WrapConfig:
    """Word wrap settings."""

    column_number: int = 80
    retain_indent: bool = True
    normalize_indent: bool = True

    def __post_init__(self) -> None:
        _require_type(self, "column_number", int)
        _require_type(self, "retain_indent", bool)
        _require_type(self, "normalize_indent", bool)


@dataclass(frozen=True, slots=True)
class QuoteConfig:
    """Block quote toggle settings."""

    skip_blank_lines: bool = False

    def __post_init__(self) -> None:
        _require_type(self, "skip_blank_lines", bool)


@dataclass(frozen=True, slots=True)
class BulletsConfig:
    """Bullet list toggle settings."""

    skip_blank_lines: bool = True

    def __post_init__(self) -> None:
        _require_type(self, "skip_blank_lines", bool)


@dataclass(frozen=True, slots=True)
class NumberingConfig:
    """Ordered list renumbering settings."""

    indent_mode: str = "rendered"

    def __post_init__(self) -> None:
        _require_type(self, "indent_mode", str)
        if self.indent_mode not in _VALID_INDENT_MODES:
            raise ValueError(
                f"indent_mode must be one of {sorted(_VALID_INDENT_MODES)}, "
                f"got {self.indent_mode!r}"
            )


@dataclass(frozen=True, slots=True)
class FenceConfig:
    """Delimiter fence defaults."""

    code_language: str = ""
    html_tag: str = "div"

    def __post_init__(self) -> None:
        _require_type(self, "code_language", str)
        _require_type(self, "html_tag", str)


@dataclass(frozen=True, slots=True)
class TableConfig:
    """CSV / Markdown table conversion settings."""

    copy_to_clipboard: bool = True

    def __post_init__(self) -> None:
        _require_type(self, "copy_to_clipboard", bool)


@dataclass(frozen=True, slots=True)
class MdBlocksConfig:
    """Root configuration node."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    wrap: WrapConfig = field(default_factory=WrapConfig)
    quote: QuoteConfig = field(default_factory=QuoteConfig)
    bullets: BulletsConfig = field(default_factory=BulletsConfig)
    numbering: NumberingConfig = field(default_factory=NumberingConfig)
    fence: FenceConfig = field(default_factory=FenceConfig)
    table: TableConfig = field(default_factory=TableConfig)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the full tree for display."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Config loading helpers
# ---------------------------------------------------------------------------


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Lists replace, dicts recurse."""
    merged = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _coerce_value(s: str) -> bool | int | float | str:
    """Coerce a CLI string value to its typed equivalent."""
    if s.lower() == "true":
        return True
    if s.lower() == "false":
        return False
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        pass
    return s


def _apply_dot_override(raw: dict[str, Any], dot_key: str, str_value: str) -> None:
    """Apply a dot-notation CLI override into the raw config dict.

    Example: _apply_dot_override(raw, "wrap.column_number", "72")
    sets raw["wrap"]["column_number"] = 72
    """
    parts = dot_key.split(".")
    target = raw
    for part in parts[:-1]:
        if part not in target:
            target[part] = {}
        target = target[part]
    target[parts[-1]] = _coerce_value(str_value)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file, returning empty dict if not found."""
    if not path.is_file():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def _load_bundled_toml(filename: str) -> dict[str, Any]:
    """Load a TOML file bundled in the config/ directory relative to project root."""
    # Walk up from this file to find the project root containing config/
    current = Path(__file__).resolve().parent
    for _ in range(5):
        config_path = current / "config" / filename
        if config_path.is_file():
            with open(config_path, "rb") as f:
                return tomllib.load(f)
        current = current.parent
    return {}


def _build_config(raw: dict[str, Any]) -> MdBlocksConfig:
    """Map a merged raw dict to the typed MdBlocksConfig tree.

    Raises:
        ValueError: If a section contains an unknown key or an invalid value.
    """
    sections = {
        "general": GeneralConfig,
        "wrap": WrapConfig,
        "quote": QuoteConfig,
        "bullets": BulletsConfig,
        "numbering": NumberingConfig,
        "fence": FenceConfig,
        "table": TableConfig,
    }
    built: dict[str, Any] = {}
    for name, section_cls in sections.items():
        section_raw = raw.get(name, {})
        try:
            built[name] = section_cls(**section_raw)
        except TypeError as exc:
            raise ValueError(f"Invalid [{name}] configuration: {exc}") from exc
    return MdBlocksConfig(**built)


def load_config(
    user_config_path: Path | None = None,
    cli_overrides: dict[str, str] | None = None,
) -> MdBlocksConfig:
    """Load configuration with 4-layer priority stack.

    Args:
        user_config_path: Path to user config TOML. Defaults to
            ~/.config/mdblocks/config.toml.
        cli_overrides: Dot-notation key→value pairs from CLI flags.

    Returns:
        Fully resolved, typed MdBlocksConfig.
    """
    # Layer 1: hardcoded defaults (implicit via dataclass defaults)
    # Layer 2: bundled default.toml
    raw = _load_bundled_toml("default.toml")

    # Layer 3: user config
    if user_config_path is None:
        user_config_path = Path.home() / ".config" / "mdblocks" / "config.toml"
    user_raw = _load_toml_file(user_config_path)
    raw = _deep_merge(raw, user_raw)

    # Layer 4: CLI overrides
    if cli_overrides:
        for dot_key, str_value in cli_overrides.items():
            _apply_dot_override(raw, dot_key, str_value)

    return _build_config(raw)
