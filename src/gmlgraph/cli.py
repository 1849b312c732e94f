"""Command line tools for inspecting GML graph documents."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from gmlgraph.config import configure_logging
from gmlgraph.errors import GmlError
from gmlgraph.graph.weights import float_weight
from gmlgraph.ingest.loader import load_gml_file, load_gml_files
from gmlgraph.ingest.models import summarize_graph

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Parse directed GML graphs")


@app.callback()
def main() -> None:
    configure_logging()


@app.command("inspect")
def inspect_graph(
    path: Path = typer.Argument(..., help="GML document to parse"),
    output_path: Optional[Path] = typer.Option(None, "--output", help="Where to write the summary JSON"),
    default_weight: float = typer.Option(0.0, help="Weight given to nodes and edges without one"),
) -> None:
    """Parse one document with numeric weights and report its size."""
    try:
        graph = load_gml_file(path, float_weight(default_weight), float_weight(default_weight))
    except GmlError as exc:
        typer.secho(f"{path}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as exc:
        typer.secho(f"Cannot read {path}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    typer.secho(
        f"Graph parsed with {graph.node_count()} nodes and {graph.edge_count()} edges.",
        fg=typer.colors.GREEN,
    )

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(summarize_graph(graph, str(path)).model_dump_json(indent=2), encoding="utf-8")
        typer.secho(f"Summary written to {output_path}", fg=typer.colors.GREEN)


@app.command()
def check(
    paths: List[Path] = typer.Argument(..., help="GML documents to validate"),
) -> None:
    """Validate several documents; exits with code 1 if any of them fails."""
    batch = load_gml_files(paths, float_weight(), float_weight())
    for summary in batch.summaries:
        typer.secho(f"ok {summary.source} ({summary.node_count} nodes, {summary.edge_count} edges)")
    for issue in batch.issues:
        typer.secho(f"- {issue}", fg=typer.colors.YELLOW)
    if batch.issues:
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
