"""
Read Command - Load document content through the file reader.

Uses the same capped, non-blocking reader an editor backend would use, which
makes it handy for checking what a URI resolves to and whether it fits the
size limit.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

import click

from ...core.errors import DocUriError
from ...core.uri import Uri
from ...io.reader import LocalFileReader
from ..utils import echo_success, fail, parse_uri

logger = logging.getLogger(__name__)


def _read(value: Uri, max_workers: Optional[int]) -> bytes:
    if max_workers is None:
        return asyncio.run(LocalFileReader().read(value))

    # Pool shutdown waits for workers, so it happens after the loop closes
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return asyncio.run(LocalFileReader(executor).read(value))


@click.command()
@click.argument("uri")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write content to a file instead of stdout",
)
@click.pass_context
def read(ctx: click.Context, uri: str, output: Optional[Path]):
    """
    Read the content of a file URI (at most 1 MiB).

    Paths are resolved with the host's conventions regardless of --platform.
    """
    settings = (ctx.find_root().obj or {}).get("settings")
    max_workers = settings.max_workers if settings else None

    value = parse_uri(uri)

    try:
        content = _read(value, max_workers)
    except DocUriError as e:
        fail(e)

    logger.debug(f"Loaded {len(content)} bytes")

    if output:
        output.write_bytes(content)
        echo_success(f"Wrote {len(content)} bytes to {output}")
        return

    stdout = click.get_binary_stream("stdout")
    stdout.write(content)
    stdout.flush()
