"""
Path Commands - Convert between URIs and filesystem paths.

Usage:
    docuri to-path URI       # file:///tmp/a%20b -> /tmp/a b
    docuri from-path PATH    # /tmp/a b -> file:///tmp/a%20b
"""

import click

from ...core.errors import UnsupportedUriError
from ...core.uri import Uri
from ..utils import fail, get_windows, parse_uri


@click.command("to-path")
@click.argument("uri")
@click.pass_context
def to_path(ctx: click.Context, uri: str):
    """Print the filesystem path a file URI points to."""
    value = parse_uri(uri)

    try:
        click.echo(value.get_filesystem_path(get_windows(ctx)))
    except UnsupportedUriError as e:
        fail(e)


@click.command("from-path")
@click.argument("path")
@click.pass_context
def from_path(ctx: click.Context, path: str):
    """Print the file URI for an absolute filesystem PATH."""
    click.echo(Uri.from_filesystem_path(path, get_windows(ctx)).serialize())
