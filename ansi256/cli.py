"""ansi256 CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import PaletteArgs, RenderArgs
from .commands import cmd_palette, cmd_render
from .exceptions import Ansi256Error, UserError

# Module logger
logger = logging.getLogger("ansi256")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("ansi256"), prog_name="ansi256")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or suppress escape sequences in output (default: only on a terminal).",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, color: bool | None):
    """ansi256: expand [[N shorthand into 256-color escape sequences."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["color"] = color
    setup_logging(debug=debug)


@cli.command("render")
@click.argument("text", nargs=-1)
@click.option(
    "--from-file",
    type=click.Path(dir_okay=False, allow_dash=True),
    help="Read lines to render from a file ('-' for stdin).",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Emit machine-readable JSON to stdout.",
)
@click.option(
    "--length",
    is_flag=True,
    help="Append the display length to each output line.",
)
@click.pass_context
def render(
    ctx: click.Context,
    text: tuple[str, ...],
    from_file: str | None,
    json_output: bool,
    length: bool,
):
    """Translate shorthand TEXT into escape sequences.

    Directives: [[ reset, [[N foreground, [[;N background, [[F;B both.
    Add a trailing 'm' (e.g. [[20m5) when literal digits follow.
    Without TEXT, lines are read from --from-file or stdin.
    """
    if text and from_file:
        raise click.UsageError("TEXT and --from-file are mutually exclusive")
    if json_output and length:
        raise click.UsageError("--json and --length are mutually exclusive")

    args = RenderArgs(
        text=list(text),
        from_file=from_file,
        json=json_output,
        length=length,
        color=ctx.obj["color"],
    )
    cmd_render(args)


@cli.command("palette")
@click.pass_context
def palette(ctx: click.Context):
    """Print all 256 colors as a 16x16 grid of background swatches."""
    args = PaletteArgs(color=ctx.obj["color"])
    cmd_palette(args)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except Ansi256Error as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
