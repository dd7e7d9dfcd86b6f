"""Tests for the layered configuration system."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdblocks.config import (
    GeneralConfig,
    MdBlocksConfig,
    _apply_dot_override,
    _coerce_value,
    _deep_merge,
    load_config,
)


class TestDeepMerge:
    """_deep_merge behavior."""

    def test_flat_override(self) -> None:
        """Scalar values in override replace base."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"outer": {"a": 1, "b": 2}}
        override = {"outer": {"b": 3, "c": 4}}
        assert _deep_merge(base, override) == {"outer": {"a": 1, "b": 3, "c": 4}}

    def test_base_unmodified(self) -> None:
        """Original base dict is not mutated."""
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestCoerceValue:
    """_coerce_value type detection."""

    def test_booleans(self) -> None:
        assert _coerce_value("true") is True
        assert _coerce_value("False") is False

    def test_integer(self) -> None:
        assert _coerce_value("72") == 72
        assert isinstance(_coerce_value("72"), int)

    def test_float(self) -> None:
        assert _coerce_value("0.5") == 0.5

    def test_string(self) -> None:
        assert _coerce_value("raw") == "raw"


class TestApplyDotOverride:
    def test_nested_path(self) -> None:
        raw: dict[str, object] = {"wrap": {"column_number": 80}}
        _apply_dot_override(raw, "wrap.column_number", "72")
        assert raw["wrap"]["column_number"] == 72  # type: ignore[index]

    def test_creates_missing_keys(self) -> None:
        raw: dict[str, object] = {}
        _apply_dot_override(raw, "fence.html_tag", "aside")
        assert raw["fence"]["html_tag"] == "aside"  # type: ignore[index]


class TestLoadConfig:
    """load_config layering."""

    def test_bundled_defaults_match_dataclass_defaults(self, default_config: MdBlocksConfig) -> None:
        assert default_config == MdBlocksConfig()

    def test_default_values(self, default_config: MdBlocksConfig) -> None:
        assert default_config.wrap.column_number == 80
        assert default_config.wrap.retain_indent is True
        assert default_config.quote.skip_blank_lines is False
        assert default_config.bullets.skip_blank_lines is True
        assert default_config.numbering.indent_mode == "rendered"

    def test_user_config_overrides_bundled(self, tmp_path: Path) -> None:
        user = tmp_path / "config.toml"
        user.write_text('[wrap]\ncolumn_number = 60\n\n[fence]\nhtml_tag = "section"\n')
        config = load_config(user_config_path=user)
        assert config.wrap.column_number == 60
        assert config.fence.html_tag == "section"
        assert config.wrap.retain_indent is True

    def test_cli_overrides_win(self, tmp_path: Path) -> None:
        user = tmp_path / "config.toml"
        user.write_text("[wrap]\ncolumn_number = 60\n")
        config = load_config(user_config_path=user, cli_overrides={"wrap.column_number": "40"})
        assert config.wrap.column_number == 40

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match=r"\[wrap\]"):
            load_config(
                user_config_path=tmp_path / "none.toml",
                cli_overrides={"wrap.colum": "40"},
            )

    def test_invalid_indent_mode(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="indent_mode"):
            load_config(
                user_config_path=tmp_path / "none.toml",
                cli_overrides={"numbering.indent_mode": "tabs"},
            )

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level"):
            GeneralConfig(log_level="loud")

    @pytest.mark.parametrize(
        ("key", "value", "field_name"),
        [
            ("wrap.column_number", "wide", "column_number"),
            ("wrap.column_number", "true", "column_number"),
            ("wrap.retain_indent", "1", "retain_indent"),
            ("general.log_level", "5", "log_level"),
            ("fence.html_tag", "3", "html_tag"),
            ("table.copy_to_clipboard", "yes", "copy_to_clipboard"),
        ],
    )
    def test_wrong_value_type_rejected(
        self, tmp_path: Path, key: str, value: str, field_name: str
    ) -> None:
        with pytest.raises(ValueError, match=field_name):
            load_config(user_config_path=tmp_path / "none.toml", cli_overrides={key: value})

    def test_config_is_frozen(self, default_config: MdBlocksConfig) -> None:
        with pytest.raises(AttributeError):
            default_config.wrap.column_number = 10  # type: ignore[misc]

    def test_to_dict(self, default_config: MdBlocksConfig) -> None:
        data = default_config.to_dict()
        assert data["wrap"]["column_number"] == 80
        assert set(data) == {"general", "wrap", "quote", "bullets", "numbering", "fence", "table"}
