"""CLI command: geocss select -- list the features a filter matches."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from geocss.errors import ParseError
from geocss.filter.factory import Filters
from geocss.filter.predicates import Feature
from geocss.selector import ExpressionSelector


def _load_features(path: Path) -> list[Feature]:
    """Read a JSON list of features or a GeoJSON FeatureCollection."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("features", [])
    return [Feature.from_mapping(item) for item in data]


@click.command()
@click.argument("expression")
@click.argument("features", type=click.Path(exists=True))
def select(expression: str, features: str) -> None:
    """Print the id of every feature in FEATURES matched by EXPRESSION.

    FEATURES is a JSON file holding either a list of
    ``{"id": ..., "properties": {...}}`` objects or a FeatureCollection.
    """
    filters = Filters()
    try:
        predicate = ExpressionSelector.parse(expression, filters).predicate
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    try:
        loaded = _load_features(Path(features))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid features file: {exc}", err=True)
        sys.exit(1)

    for feature in loaded:
        if predicate.evaluate(feature):
            click.echo(feature.id)
