"""CLI: richmsg share"""

from typing import Optional

import click

from richmsg.templates import share


def _emit(message, fmt: str) -> None:
    from richmsg.cli.main import _emit
    _emit(message, fmt)


@click.command("share")
@click.argument("url")
@click.option("--title", default=None)
@click.option("--content", default=None, help="Summary line under the title")
@click.option("--cover", "cover_url", default=None, help="Cover picture URL")
@click.option("--format", "fmt", type=click.Choice(["xml", "code", "json"]), default="xml")
def share_cmd(url: str, title: Optional[str], content: Optional[str], cover_url: Optional[str], fmt: str):
    """Build a link share card."""
    _emit(share(url, title=title, content=content, cover_url=cover_url), fmt)
