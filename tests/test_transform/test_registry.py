"""Tests for the transform registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdblocks.block import Block
from mdblocks.config import MdBlocksConfig, load_config
from mdblocks.core.protocols import BlockTransform
from mdblocks.transform import TRANSFORM_NAMES, Transform, get_transform


def _block(*lines: str, end_of_paragraph: bool = True) -> Block:
    return Block.from_lines(list(lines), is_end_of_paragraph=end_of_paragraph)


class TestGetTransform:
    """get_transform factory behavior."""

    @pytest.mark.parametrize("name", [n for n in TRANSFORM_NAMES if n != "fence"])
    def test_all_names_resolve(self, name: str) -> None:
        transform = get_transform(name)
        assert isinstance(transform, Transform)
        assert isinstance(transform, BlockTransform)
        assert transform.name == name

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown transform"):
            get_transform("shout")

    def test_fence_requires_delimiters(self) -> None:
        with pytest.raises(ValueError, match="start"):
            get_transform("fence")

    def test_fence_with_delimiters(self) -> None:
        transform = get_transform("fence", start="<aside>\n", end="\n</aside>")
        assert transform.apply(_block("x")) == ["<aside>", "", "x", "", "</aside>"]

    def test_only_table_publishes(self) -> None:
        assert get_transform("table").publishes
        assert not get_transform("quote").publishes

    def test_table_publish_follows_config(self, tmp_path: Path) -> None:
        config = load_config(
            user_config_path=tmp_path / "none.toml",
            cli_overrides={"table.copy_to_clipboard": "false"},
        )
        assert not get_transform("table", config).publishes


class TestConfiguredTransforms:
    def test_wrap_column_param_overrides_config(self) -> None:
        transform = get_transform("wrap", MdBlocksConfig(), column=10)
        assert transform.apply(_block("Lorem ipsum dolor sit amet.")) == [
            "Lorem",
            "ipsum",
            "dolor sit",
            "amet.",
        ]

    def test_wrap_uses_config_column(self, tmp_path: Path) -> None:
        config = load_config(
            user_config_path=tmp_path / "none.toml",
            cli_overrides={"wrap.column_number": "9"},
        )
        assert get_transform("wrap", config).apply(_block("one two three")) == [
            "one two",
            "three",
        ]

    def test_unwrap_follows_normalize_indent(self, tmp_path: Path) -> None:
        raw = load_config(
            user_config_path=tmp_path / "none.toml",
            cli_overrides={"wrap.normalize_indent": "false"},
        )
        block = _block("\tone", "two")
        assert get_transform("unwrap", raw).apply(block) == ["\tone two"]
        assert get_transform("unwrap").apply(block) == ["    one two"]

    def test_breaks_respects_end_of_paragraph(self) -> None:
        transform = get_transform("breaks")
        assert transform.apply(_block("a", "b", end_of_paragraph=True)) == ["a \\", "b"]
        assert transform.apply(_block("a", "b", end_of_paragraph=False)) == ["a \\", "b \\"]

    def test_quote_skip_blank_from_config(self, tmp_path: Path) -> None:
        config = load_config(
            user_config_path=tmp_path / "none.toml",
            cli_overrides={"quote.skip_blank_lines": "true"},
        )
        assert get_transform("quote", config).apply(_block("a", "", "b")) == ["> a", "", "> b"]

    def test_renumber_raw_mode_from_config(self, tmp_path: Path) -> None:
        config = load_config(
            user_config_path=tmp_path / "none.toml",
            cli_overrides={"numbering.indent_mode": "raw"},
        )
        lines = ("1. a", "\t1. x", "    1. y")
        assert get_transform("renumber", config).apply(_block(*lines)) == [
            "1.  a",
            "\t1.  x",
            "    1.  y",
        ]

    def test_code_uses_lang_param(self) -> None:
        assert get_transform("code", lang="sql").apply(_block("select 1")) == [
            "```sql",
            "select 1",
            "```",
        ]

    def test_html_default_tag(self) -> None:
        assert get_transform("html").apply(_block("x"))[0] == "<div>"
