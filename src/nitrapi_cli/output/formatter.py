"""Render command results as a table, JSON, YAML, or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console

from nitrapi_cli.models.value import Value
from nitrapi_cli.output.tables import cell, kv_table, make_table

FORMATS = ("table", "json", "yaml", "csv")

console = Console()


def to_plain(data: Any) -> Any:
    """Convert snapshots, status values and containers to JSON-compatible data.

    Absent (``None``) model fields are dropped rather than printed as null.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, Value):
        return str(data)
    if isinstance(data, (list, tuple)):
        return [to_plain(item) for item in data]
    if isinstance(data, dict):
        return {key: to_plain(value) for key, value in data.items()}
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(to_plain(data), default=str))


def output_yaml(data: Any) -> None:
    text = yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False)
    console.print(text, end="", markup=False, highlight=False)


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print rows as CSV; unknown values become empty cells."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    for row in rows:
        writer.writerow(["" if v is None else cell(v) for v in row])
    console.print(buf.getvalue(), end="", markup=False, highlight=False)


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Print explicit rows as a table, a mapping or model as key/value pairs."""
    if columns and rows is not None:
        console.print(make_table(title, columns, rows))
        return
    plain = to_plain(data)
    if isinstance(plain, dict):
        console.print(kv_table(plain, title=title))
    else:
        console.print(plain)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Print *data* in format *fmt*.

    *columns* and *rows* are the tabular view used by ``table`` and ``csv``;
    without them ``csv`` falls back to JSON. Raises ``ValueError`` for an
    unknown format.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from: {', '.join(FORMATS)}")
    if fmt == "json" or (fmt == "csv" and not (columns and rows is not None)):
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        output_csv(columns, rows)
    else:
        output_table(data, columns=columns, rows=rows, title=title)
