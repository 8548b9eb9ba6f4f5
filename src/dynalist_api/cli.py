"""CLI for the Dynalist API (list files, read documents, add inbox items)."""

import json
from typing import Annotated

import typer
from loguru import logger

from dynalist_api.client import DynalistClient
from dynalist_api.errors import DynalistError
from dynalist_api.limits import all_limits
from dynalist_api.logging_config import configure_logging
from dynalist_api.models.change import inbox_item
from dynalist_api.models.entities import File, walk_tree
from dynalist_api.models.responses import FileListResponse, Response
from dynalist_api.protocols import ClientProtocol

app = typer.Typer(help="Dynalist API: list files, read documents, add to the inbox.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _make_client() -> ClientProtocol:
    """Build the client, exiting with an error if no token is configured."""
    try:
        return DynalistClient()
    except DynalistError as e:
        logger.error("{}", e)
        raise typer.Exit(2) from e


def _check(response: Response) -> None:
    if not response.ok:
        logger.error("{}: {}", response.code, response.message or response.code.description)
        raise typer.Exit(1)


def _file_tree(listing: FileListResponse) -> list[tuple[int, File]]:
    """Walk the file list from the root, in the order shown in the UI."""
    root = listing.root_file_id
    if root is None or listing.root is None:
        return [(0, f) for f in listing.files]
    return list(walk_tree(listing.files, root))


@app.command()
def files(
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List documents and folders."""
    client = _make_client()
    try:
        listing = client.list_files()
    except DynalistError as e:
        logger.error("{}", e)
        raise typer.Exit(2) from e
    _check(listing)

    if output_json:
        data = {
            "root_file_id": listing.root_file_id,
            "files": [f.to_dict() for f in listing.files],
        }
        typer.echo(json.dumps(data, indent=2))
        return

    for depth, f in _file_tree(listing):
        marker = "/" if f.is_folder else ""
        typer.echo(f"{'  ' * depth}{f.title}{marker}  [id={f.id}]")


@app.command()
def read(
    file_id: str = typer.Argument(..., help="Document file id"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print a document outline."""
    client = _make_client()
    try:
        doc = client.read_document(file_id)
    except DynalistError as e:
        logger.error("{}", e)
        raise typer.Exit(2) from e
    _check(doc)

    if output_json:
        data = {"title": doc.title, "nodes": [n.to_dict() for n in doc.nodes]}
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"# {doc.title}")
    for depth, node in walk_tree(doc.nodes):
        if depth == 0:
            continue
        box = ""
        if node.checkbox or node.checked is not None:
            box = "[x] " if node.checked else "[ ] "
        typer.echo(f"{'  ' * (depth - 1)}- {box}{node.content}")
        if node.note:
            typer.echo(f"{'  ' * depth}{node.note}")


@app.command()
def updates(
    file_ids: Annotated[list[str], typer.Argument(help="Document file ids")],
) -> None:
    """Show the current version of each document."""
    client = _make_client()
    try:
        result = client.check_for_updates(file_ids)
    except DynalistError as e:
        logger.error("{}", e)
        raise typer.Exit(2) from e
    _check(result)

    for file_id in file_ids:
        version = result.versions.get(file_id)
        typer.echo(f"{file_id}\t{version if version is not None else '-'}")


@app.command()
def inbox(
    content: str = typer.Argument(..., help="Item text"),
    note: Annotated[str | None, typer.Option("--note", "-n", help="Item note")] = None,
    checked: bool = typer.Option(False, "--checked", "-c", help="Add the item already checked"),
) -> None:
    """Append an item to the inbox."""
    client = _make_client()
    try:
        result = client.add_to_inbox(inbox_item(content, note=note, checked=checked or None))
    except DynalistError as e:
        logger.error("{}", e)
        raise typer.Exit(2) from e
    _check(result)
    typer.echo(f"Added node {result.node_id} to {result.file_id}")


@app.command()
def limits() -> None:
    """Show the advisory rate limit of each endpoint."""
    for name, limit in all_limits().items():
        typer.echo(f"{name:<24} 1 per {limit.interval:g}s, burst {limit.burst}")
