"""
richmsg CLI — `richmsg` command.

Commands:
  richmsg share <url>      Link share card
  richmsg card             Custom XML card with one item
"""

import json
import sys
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.syntax import Syntax
except ImportError:
    raise SystemExit("CLI requires extras: pip install richmsg[cli]")

from richmsg import __version__
from richmsg.models.element import to_element
from richmsg.models.rich import RichMessage

console = Console()
CONFIG_FILE = Path.home() / ".richmsg" / "config.json"
FORMATS = ("xml", "code", "json")


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _stdout_is_tty() -> bool:
    return sys.stdout.isatty()


def _emit(message: RichMessage, fmt: str) -> None:
    if fmt == "json":
        click.echo(json.dumps(to_element(message), ensure_ascii=False))
    elif fmt == "code":
        click.echo(str(message))
    elif _stdout_is_tty():
        console.print(Syntax(message.content, "xml", word_wrap=True))
    else:
        click.echo(message.content)


@click.group()
@click.version_option(__version__)
def main():
    """richmsg CLI — build rich message payloads."""


# Register subcommands from separate modules
from richmsg.cli.card import card_cmd
from richmsg.cli.share import share_cmd

main.add_command(share_cmd)
main.add_command(card_cmd)


if __name__ == "__main__":
    main()
