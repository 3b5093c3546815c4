"""
Command-line interface for pgmodel.

Reads a JSON introspection snapshot and writes the resolved schema model.
"""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from pgmodel.introspection.errors import IntrospectionError
from pgmodel.introspection.snapshot import load_snapshot
from pgmodel.logging_config import get_logger, setup_logging
from pgmodel.model import SchemaModel, from_introspection

logger = get_logger(__name__)

schema_option = click.option(
    "--schema",
    type=str,
    default="public",
    envvar="PGMODEL_SCHEMA",
    show_default=True,
    help="Schema (namespace) whose tables are modeled",
)
snapshot_argument = click.argument(
    "snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _build(snapshot: Path, schema: str) -> SchemaModel:
    try:
        return from_introspection(load_snapshot(snapshot), schema)
    except ValidationError as e:
        raise click.ClickException(f"Invalid introspection snapshot {snapshot}: {e}")
    except IntrospectionError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version="0.1.0", prog_name="pgmodel")
def cli() -> None:
    """Build a resolved schema model from PostgreSQL introspection data."""
    setup_logging()


@cli.command()
@snapshot_argument
@schema_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the model JSON to this file instead of stdout",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
def build(snapshot: Path, schema: str, output: Optional[Path], indent: int) -> None:
    """Resolve SNAPSHOT and print the schema model as JSON."""
    model = _build(snapshot, schema)
    text = model.model_dump_json(indent=indent or None)

    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote schema model to %s", output)


@cli.command()
@snapshot_argument
@schema_option
def summary(snapshot: Path, schema: str) -> None:
    """Print one line per table with its column, reference and index counts."""
    model = _build(snapshot, schema)

    for table in model.tables:
        click.echo(
            f"{table.name}: {len(table.attributes)} columns, "
            f"{len(table.external_references)} references, "
            f"{len(table.indexed_attrs)} indexed, "
            f"{len(model.functions.computed_columns_by_table[table.name])} computed columns"
        )
    click.echo(
        f"enum types: {len(model.enum_types)}, "
        f"queries: {len(model.functions.queries)}, "
        f"mutations: {len(model.functions.mutations)}"
    )


if __name__ == "__main__":
    cli()
