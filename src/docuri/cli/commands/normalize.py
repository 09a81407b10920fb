"""
Normalize Command - Print the canonical form of a URI.
"""

import click

from ..utils import get_windows, parse_uri


@click.command()
@click.argument("uri")
@click.option("--glob", "as_glob", is_flag=True, help="Turn %2A back into * wildcards")
@click.pass_context
def normalize(ctx: click.Context, uri: str, as_glob: bool):
    """
    Print the normalized form of URI.

    The normalized form is what docuri uses to compare URIs, so two URIs
    naming the same file print the same line.
    """
    value = parse_uri(uri)
    windows = get_windows(ctx)

    if as_glob:
        click.echo(value.get_normalized_glob(windows))
    else:
        click.echo(value.get_normalized(windows))
