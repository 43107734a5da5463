"""
XML card builder.

A builder is configured by a caller-supplied function, rendered once, and
discarded::

    def card(b: XmlMessageBuilder) -> None:
        b.brief = "hello"
        b.item(lambda i: i.title("Hi").summary("there"))
        b.source("richmsg")

    message = build_xml_message(card, service_id=1)

Builders hold no locks. Use one builder per call, never share one between
threads.

Values are interpolated into the template verbatim. Nothing is escaped, so a
value containing ``'``, ``<``, ``>`` or ``&`` yields malformed XML. Escaping
is left to the caller.
"""

import logging
import warnings
from typing import Callable, Optional

from richmsg.errors import MissingFieldError
from richmsg.models.rich import XML_SERVICE_ID, XmlMessage

logger = logging.getLogger(__name__)

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8' standalone='yes' ?>"
DEFAULT_COLOR = "#000000"
DEFAULT_TITLE_SIZE = 25


def _require(name: str, value: object) -> None:
    if value is None:
        raise MissingFieldError(name)


class ItemBuilder:
    """Accumulates picture/title/summary elements for one ``<item>`` block."""

    def __init__(self, bg: int = 0, layout: int = 4):
        self.bg = bg
        self.layout = layout
        self._parts: list[str] = []

    def picture(self, cover_url: str) -> "ItemBuilder":
        _require("cover_url", cover_url)
        self._parts.append(f"<picture cover='{cover_url}'/>")
        return self

    def title(self, text: str, size: int = DEFAULT_TITLE_SIZE, color: str = DEFAULT_COLOR) -> "ItemBuilder":
        _require("text", text)
        _require("size", size)
        _require("color", color)
        self._parts.append(f"<title size='{size}' color='{color}'>{text}</title>")
        return self

    def summary(self, text: str, color: str = DEFAULT_COLOR) -> "ItemBuilder":
        _require("text", text)
        _require("color", color)
        self._parts.append(f"<summary color='{color}'>{text}</summary>")
        return self

    def render(self) -> str:
        return f"<item bg='{self.bg}' layout='{self.layout}'>{''.join(self._parts)}</item>"


class XmlMessageBuilder:
    """Card-level fields plus an ordered list of rendered ``<item>`` blocks."""

    def __init__(
        self,
        template_id: int = 1,
        service_id: int = 1,
        action: str = "plugin",
        action_data: str = "",  # usually the link opened on click
        brief: str = "",        # summary shown in the client's message list
        flag: int = 3,
        url: str = "",
        source_name: str = "",
        source_icon_url: str = "",
    ):
        self.template_id = template_id
        self.service_id = service_id
        self.action = action
        self.action_data = action_data
        self.brief = brief
        self.flag = flag
        self.url = url
        self.source_name = source_name
        self.source_icon_url = source_icon_url
        self._items: list[str] = []

    def item(
        self,
        configure: Optional[Callable[[ItemBuilder], object]] = None,
        bg: int = 0,
        layout: int = 4,
    ) -> "XmlMessageBuilder":
        """Append one ``<item>`` block, configured by ``configure`` before rendering."""
        _require("bg", bg)
        _require("layout", layout)
        builder = ItemBuilder(bg=bg, layout=layout)
        if configure is not None:
            configure(builder)
        self._items.append(builder.render())
        return self

    def source(self, name: str, icon_url: str = "") -> "XmlMessageBuilder":
        _require("name", name)
        _require("icon_url", icon_url)
        self.source_name = name
        self.source_icon_url = icon_url
        return self

    def render(self) -> str:
        return (
            XML_DECLARATION
            + f"<msg templateID='{self.template_id}' serviceID='{self.service_id}'"
            f" action='{self.action}' actionData='{self.action_data}' brief='{self.brief}'"
            f" flag='{self.flag}' url='{self.url}'>"
            + "".join(self._items)
            + f"<source name='{self.source_name}' icon='{self.source_icon_url}'/>"
            + "</msg>"
        )


def build_xml_message(
    configure: Callable[[XmlMessageBuilder], object],
    service_id: Optional[int] = None,
) -> XmlMessage:
    """Configure a fresh builder, render it, and wrap the text in an :class:`XmlMessage`.

    The builder starts with ``service_id`` and every other field at its default.
    Omitting ``service_id`` is deprecated and means 60.
    """
    if service_id is None:
        warnings.warn(
            "build_xml_message without service_id is deprecated; pass service_id=60 explicitly",
            DeprecationWarning,
            stacklevel=2,
        )
        service_id = XML_SERVICE_ID
    builder = XmlMessageBuilder(service_id=service_id)
    configure(builder)
    text = builder.render()
    logger.debug("Rendered XML message serviceID=%s (%d chars)", service_id, len(text))
    return XmlMessage(text, service_id=service_id)
