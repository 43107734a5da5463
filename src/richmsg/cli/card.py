"""CLI: richmsg card"""

from typing import Optional

import click

from richmsg.builder import ItemBuilder, XmlMessageBuilder, build_xml_message
from richmsg.models.rich import XML_SERVICE_ID

ELEMENT_KINDS = ("picture", "title", "summary")


def _load_config() -> dict:
    from richmsg.cli.main import _load_config
    return _load_config()


def _emit(message, fmt: str) -> None:
    from richmsg.cli.main import _emit
    _emit(message, fmt)


def _parse_elements(ctx, param, values: tuple[str, ...]) -> list[tuple[str, str]]:
    elements = []
    for value in values:
        kind, sep, text = value.partition("=")
        if not sep or kind not in ELEMENT_KINDS:
            raise click.BadParameter(f"expected picture=URL, title=TEXT or summary=TEXT, got {value!r}")
        elements.append((kind, text))
    return elements


@click.command("card")
@click.option("--template-id", default=1, type=int)
@click.option("--service-id", default=XML_SERVICE_ID, type=int)
@click.option("--action", default="plugin")
@click.option("--action-data", default="")
@click.option("--brief", default="")
@click.option("--flag", default=3, type=int)
@click.option("--url", default="")
@click.option("--source-name", default=None)
@click.option("--source-icon", default=None)
@click.option("-e", "--element", "elements", multiple=True, callback=_parse_elements,
              help="Item element as KIND=VALUE (picture, title, summary). Repeatable, kept in order.")
@click.option("--layout", default=4, type=int)
@click.option("--bg", default=0, type=int)
@click.option("--format", "fmt", type=click.Choice(["xml", "code", "json"]), default="xml")
def card_cmd(
    template_id: int,
    service_id: int,
    action: str,
    action_data: str,
    brief: str,
    flag: int,
    url: str,
    source_name: Optional[str],
    source_icon: Optional[str],
    elements: list[tuple[str, str]],
    layout: int,
    bg: int,
    fmt: str,
):
    """Build an XML card with a single item."""
    cfg = _load_config()

    def fill_item(item: ItemBuilder) -> None:
        for kind, text in elements:
            getattr(item, kind)(text)

    def configure(builder: XmlMessageBuilder) -> None:
        builder.template_id = template_id
        builder.action = action
        builder.action_data = action_data
        builder.brief = brief
        builder.flag = flag
        builder.url = url
        builder.source(
            source_name if source_name is not None else cfg.get("source_name", ""),
            source_icon if source_icon is not None else cfg.get("source_icon", ""),
        )
        builder.item(fill_item, bg=bg, layout=layout)

    _emit(build_xml_message(configure, service_id=service_id), fmt)
