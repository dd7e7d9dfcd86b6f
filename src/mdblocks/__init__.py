"""mdblocks -- toggle-style text block transformations for Markdown editing."""

from __future__ import annotations

__version__ = "0.1.0"
