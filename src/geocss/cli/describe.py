"""CLI command: geocss describe -- show the title/abstract of a doc comment."""

from __future__ import annotations

from pathlib import Path

import click

from geocss.model.description import Description


@click.command()
@click.argument("comment_file", type=click.Path(exists=True))
def describe(comment_file: str) -> None:
    """Print the @title and @abstract declared in COMMENT_FILE."""
    comment = Path(comment_file).read_text(encoding="utf-8")
    description = Description.from_comment(comment)

    click.echo(f"Title:    {description.title or '(none)'}")
    click.echo(f"Abstract: {description.abstract or '(none)'}")
