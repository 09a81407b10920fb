"""
Parse Command - Show the components of a URI.

Displays the decoded components together with the serialized and normalized
forms, either as a table or as JSON for scripting.
"""

from typing import Optional

import click
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ...core.errors import UnsupportedUriError
from ...core.uri import Uri
from ..utils import get_windows, parse_uri

console = Console()


# --- API Models ---
class UriInfo(BaseModel):
    """
    Structured response for the parse command.
    """
    scheme: Optional[str] = None
    authority: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None
    serialized: str
    normalized: str
    filesystem_path: Optional[str] = None

    @classmethod
    def from_uri(cls, uri: Uri, windows: Optional[bool] = None) -> "UriInfo":
        try:
            filesystem_path = uri.get_filesystem_path(windows)
        except UnsupportedUriError:
            filesystem_path = None

        return cls(
            scheme=uri.scheme,
            authority=uri.authority,
            path=uri.path,
            query=uri.query,
            fragment=uri.fragment,
            serialized=uri.serialize(),
            normalized=uri.get_normalized(windows),
            filesystem_path=filesystem_path,
        )


@click.command()
@click.argument("uri")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def parse(ctx: click.Context, uri: str, as_json: bool):
    """
    Parse URI and show its components.

    Absent components are shown as empty.
    """
    info = UriInfo.from_uri(parse_uri(uri), get_windows(ctx))

    if as_json:
        click.echo(info.model_dump_json(indent=2))
        return

    table = Table(title="URI components", show_header=True)
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    for name, value in info.model_dump().items():
        table.add_row(name, "" if value is None else value)

    console.print(table)
