"""
Compare Commands - Equality and containment checks.

Both commands print ``true`` or ``false`` and exit with 0 or 1 accordingly,
so they can be used directly in shell conditionals.
"""

import sys

import click

from ..utils import echo_bool, get_windows, parse_uri


@click.command()
@click.argument("parent")
@click.argument("child")
@click.pass_context
def contains(ctx: click.Context, parent: str, child: str):
    """
    Check whether CHILD lies strictly below PARENT.

    Matching is by whole path segments on the normalized forms, so
    file:///a contains file:///a/b but not file:///ab.
    """
    result = parse_uri(parent).is_parent_of(parse_uri(child), get_windows(ctx))
    echo_bool(result)
    sys.exit(0 if result else 1)


@click.command()
@click.argument("first")
@click.argument("second")
@click.pass_context
def equals(ctx: click.Context, first: str, second: str):
    """Check whether two URIs name the same document."""
    result = parse_uri(first).equals(parse_uri(second), get_windows(ctx))
    echo_bool(result)
    sys.exit(0 if result else 1)
