"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdblocks.buffer import Buffer
from mdblocks.config import MdBlocksConfig, load_config


@pytest.fixture
def default_config(tmp_path: Path) -> MdBlocksConfig:
    """Load bundled defaults, isolated from any real user config."""
    return load_config(user_config_path=tmp_path / "missing.toml")


@pytest.fixture
def document() -> Buffer:
    """Three paragraphs separated by single blank lines."""
    return Buffer(
        lines=[
            "First paragraph line one",
            "first paragraph line two",
            "",
            "Second paragraph",
            "",
            "Third paragraph a",
            "Third paragraph b",
        ]
    )
