"""ansi256 render command."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from ..translator import translate
from ..utils import read_input_lines

if TYPE_CHECKING:
    from ..cli_types import RenderArgs

logger = logging.getLogger(__name__)


def cmd_render(args: RenderArgs) -> None:
    """Translate shorthand text and print the result.

    TEXT arguments are joined with spaces and rendered as one line. Without
    TEXT, each line of --from-file (or stdin) is rendered separately.
    """
    if args.text:
        lines = [" ".join(args.text)]
    else:
        lines = read_input_lines(args.from_file or "-")
    logger.debug("Rendering %d line(s)", len(lines))

    for line in lines:
        value = translate(line)
        if args.json:
            click.echo(
                json.dumps({"content": value.content, "display_length": value.display_length})
            )
        elif args.length:
            click.echo(f"{value}\t({value.display_length})", color=args.color)
        else:
            click.echo(str(value), color=args.color)
