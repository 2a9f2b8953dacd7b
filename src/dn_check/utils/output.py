"""Rendering a ResultSet as a table, text lines or JSON."""

import json
from pathlib import Path
from typing import List

from rich.table import Table

from ..exceptions import OutputError
from ..models import ResultSet


def _columns(result_set: ResultSet) -> List[str]:
    return list(dict.fromkeys(result_set.tlds))


def build_table(result_set: ResultSet, color: bool = True) -> Table:
    """Aligned table with a YES/NO column per TLD."""
    table = Table(title="Domain Availability")
    table.add_column("Name", style="cyan" if color else None)
    tlds = _columns(result_set)
    for tld in tlds:
        table.add_column(tld, justify="center")

    yes, no, unknown = ("[green]YES[/green]", "[red]NO[/red]", "[dim]-[/dim]") if color else ("YES", "NO", "-")
    for result in result_set:
        cells = []
        for tld in tlds:
            verdict = result.verdict_for(tld)
            if verdict is None:
                cells.append(unknown)
            else:
                cells.append(yes if verdict.available else no)
        table.add_row(result.name, *cells)
    return table


def format_lines(result_set: ResultSet) -> List[str]:
    """One ``name.tld : true|false`` line per verdict."""
    return [
        f"{r.name}.{v.tld} : {'true' if v.available else 'false'}"
        for r in result_set for v in r.verdicts
    ]


def format_sentences(result_set: ResultSet) -> List[str]:
    return [
        f"{r.name}.{v.tld} is {'available' if v.available else 'not available'}"
        for r in result_set for v in r.verdicts
    ]


def to_json(result_set: ResultSet) -> str:
    return json.dumps(result_set.to_list(), indent=2)


def spool_output(output_file: str, result_set: ResultSet, json_output: bool = False):
    """Write results to a file as JSON or flat lines."""
    output_path = Path(output_file)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            if json_output:
                f.write(to_json(result_set) + "\n")
            else:
                for line in format_lines(result_set):
                    f.write(line + "\n")
    except OSError as e:
        raise OutputError(f"Cannot write results to {output_file}: {e}") from e
