"""Click-based CLI for mdblocks."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from mdblocks import __version__
from mdblocks.config import MdBlocksConfig, load_config

logger = logging.getLogger("mdblocks")


def _block_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Arguments and options shared by every block transform command."""
    decorators = [
        click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)),
        click.option(
            "--line",
            type=int,
            default=1,
            show_default=True,
            help="Cursor line; the paragraph under it is transformed.",
        ),
        click.option(
            "--select",
            type=(int, int),
            default=None,
            metavar="START END",
            help="Transform lines START..END (inclusive) instead of a paragraph.",
        ),
        click.option("-i", "--in-place", is_flag=True, default=False, help="Rewrite the file."),
        click.option(
            "--report",
            type=click.Choice(["text", "json"]),
            default=None,
            help="Print a summary of the edit to stderr.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _run_transform(
    ctx: click.Context,
    name: str,
    input_path: Path,
    line: int,
    select: tuple[int, int] | None,
    in_place: bool,
    report: str | None,
    **params: Any,
) -> None:
    """Load a file into a buffer, apply one transform, and emit the result."""
    from mdblocks.buffer import Buffer
    from mdblocks.report import ReportFormatter
    from mdblocks.selector import BlockSelector
    from mdblocks.transform import get_transform

    obj = ctx.obj
    config: MdBlocksConfig = obj["config"]
    try:
        transform = get_transform(name, config, **params)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    buffer = Buffer.from_text(input_path.read_text(encoding="utf-8"), cursor=line, visual=select)
    result = BlockSelector(buffer).map_block(transform)
    if result is None:
        message = buffer.messages[-1][1] if buffer.messages else "No block to transform"
        raise click.ClickException(message)

    text = buffer.to_text()
    if in_place:
        input_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", input_path)
    else:
        click.echo(text, nl=False)

    if report is not None:
        console = Console(stderr=True, quiet=obj["quiet"])
        ReportFormatter().print(console, result, report, input_path=str(input_path))


@click.group()
@click.version_option(version=__version__, prog_name="mdblocks")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to user config TOML file.",
)
@click.option("--set", "set_kv", nargs=2, multiple=True, help="Override config KEY VALUE.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output.")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Suppress all output.")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    set_kv: tuple[tuple[str, str], ...],
    verbose: bool,
    quiet: bool,
) -> None:
    """mdblocks -- toggle quotes, lists, fences, wrapping and tables in text blocks."""
    ctx.ensure_object(dict)
    try:
        cfg = load_config(user_config_path=config_path, cli_overrides=dict(set_kv))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--set/--config") from exc
    ctx.obj = {
        "config": cfg,
        "verbose": verbose,
        "quiet": quiet,
    }

    # Configure logging
    level = logging.DEBUG if verbose else getattr(logging, cfg.general.log_level.upper())
    if quiet:
        level = logging.CRITICAL
    logging.basicConfig(level=level, format="%(name)s: %(message)s", stream=sys.stderr)


@main.command()
@_block_options
@click.option("--column", type=int, default=None, help="Wrap column (default from config).")
@click.option(
    "--indent",
    "indent",
    type=click.Choice(["retain", "first"]),
    default=None,
    help="retain: indent every wrapped line like the first; first: indent only the first line.",
)
@click.pass_context
def wrap(ctx: click.Context, column: int | None, indent: str | None, **opts: Any) -> None:
    """Wrap each paragraph of the block at a column."""
    retain_indent = None if indent is None else indent == "retain"
    _run_transform(ctx, "wrap", column=column, retain_indent=retain_indent, **opts)


@main.command()
@_block_options
@click.pass_context
def unwrap(ctx: click.Context, **opts: Any) -> None:
    """Join each paragraph of the block onto one line."""
    _run_transform(ctx, "unwrap", **opts)


@main.command()
@_block_options
@click.pass_context
def quote(ctx: click.Context, **opts: Any) -> None:
    """Toggle '> ' block quoting."""
    _run_transform(ctx, "quote", **opts)


@main.command()
@_block_options
@click.pass_context
def bullets(ctx: click.Context, **opts: Any) -> None:
    """Toggle a '- ' bullet list."""
    _run_transform(ctx, "bullets", **opts)


@main.command()
@_block_options
@click.pass_context
def breaks(ctx: click.Context, **opts: Any) -> None:
    """Toggle trailing backslash line breaks."""
    _run_transform(ctx, "breaks", **opts)


@main.command()
@_block_options
@click.pass_context
def number(ctx: click.Context, **opts: Any) -> None:
    """Toggle numbering of non-indented lines."""
    _run_transform(ctx, "number", **opts)


@main.command()
@_block_options
@click.pass_context
def renumber(ctx: click.Context, **opts: Any) -> None:
    """Renumber ordered list items, nested lists independently."""
    _run_transform(ctx, "renumber", **opts)


@main.command()
@_block_options
@click.pass_context
def rule(ctx: click.Context, **opts: Any) -> None:
    """Toggle horizontal rules around the block."""
    _run_transform(ctx, "rule", **opts)


@main.command()
@_block_options
@click.option("--lang", default=None, help="Code fence language tag.")
@click.pass_context
def code(ctx: click.Context, lang: str | None, **opts: Any) -> None:
    """Toggle a fenced code block."""
    _run_transform(ctx, "code", lang=lang, **opts)


@main.command()
@_block_options
@click.option("--tag", default=None, help="HTML block element (default from config).")
@click.pass_context
def html(ctx: click.Context, tag: str | None, **opts: Any) -> None:
    """Toggle a block-level HTML element around the block."""
    _run_transform(ctx, "html", tag=tag, **opts)


@main.command()
@_block_options
@click.pass_context
def comment(ctx: click.Context, **opts: Any) -> None:
    """Toggle an HTML comment around the block."""
    _run_transform(ctx, "comment", **opts)


@main.command()
@_block_options
@click.option("--start", required=True, help="Start delimiter; a trailing \\n pads a blank line.")
@click.option("--end", required=True, help="End delimiter; a leading \\n pads a blank line.")
@click.pass_context
def fence(ctx: click.Context, start: str, end: str, **opts: Any) -> None:
    """Toggle custom start/end delimiter lines."""
    _run_transform(
        ctx,
        "fence",
        start=start.replace("\\n", "\n"),
        end=end.replace("\\n", "\n"),
        **opts,
    )


@main.command()
@_block_options
@click.pass_context
def table(ctx: click.Context, **opts: Any) -> None:
    """Convert between CSV and a Markdown table."""
    _run_transform(ctx, "table", **opts)


@main.command(name="config")
@click.pass_context
def config_cmd(ctx: click.Context) -> None:
    """View the resolved mdblocks configuration."""
    import json as json_mod

    from rich.syntax import Syntax

    obj = ctx.obj
    config: MdBlocksConfig = obj["config"]
    console = Console(quiet=obj["quiet"])

    json_str = json_mod.dumps(config.to_dict(), indent=2)
    syntax = Syntax(json_str, "json", theme="monokai")
    console.print(syntax)
