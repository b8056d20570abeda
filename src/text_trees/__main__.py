"""CLI entry point for text-trees."""

import dataclasses
import logging
import sys

import click

from text_trees.config import TreeFormatting
from text_trees.errors import FormatError
from text_trees.fs import make_dir_tree
from text_trees.render import render
from text_trees.renderers.charset import CharSet, FormatCharacters
from text_trees.types import AnchorPosition


@click.command()
@click.argument("path", required=False, default=".", type=click.Path(exists=True))
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of box-drawing characters")
@click.option("--left", "-l", "left", is_flag=True, help="Anchor connectors to the left of each label")
@click.option("--prefix", "-p", "prefix", type=str, default=None, help="Text written before every line")
@click.option("--line-count", "line_count", type=int, default=None, help="Horizontal line length in connectors")
@click.option("--follow-symlinks", "follow_symlinks", is_flag=True, help="Descend into symlinked directories")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug information to stderr")
def main(
    path: str,
    use_ascii: bool,
    left: bool,
    prefix: str | None,
    line_count: int | None,
    follow_symlinks: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """Render a directory as a text tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        chars = FormatCharacters.for_charset(CharSet.Ascii if use_ascii else CharSet.Unicode)
        if line_count is not None:
            chars = dataclasses.replace(chars, horizontal_line_count=line_count)
        formatting = TreeFormatting(
            prefix_str=prefix,
            anchor=AnchorPosition.Left if left else AnchorPosition.Below,
            chars=chars,
        )
    except FormatError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = render(make_dir_tree(path, follow_symlinks=follow_symlinks), formatting)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
