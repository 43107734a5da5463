"""
Ready-made XML card templates.
"""

from typing import Optional

from richmsg.builder import ItemBuilder, XmlMessageBuilder, build_xml_message
from richmsg.errors import MissingFieldError
from richmsg.models.rich import XML_SERVICE_ID, XmlMessage

SHARE_TEMPLATE_ID = 12345
SHARE_SERVICE_ID = 1
SHARE_BRIEF_PREFIX = "[分享] "


def share(
    url: str,
    title: Optional[str] = None,
    content: Optional[str] = None,
    cover_url: Optional[str] = None,
) -> XmlMessage:
    """Link share card. Optional parts left as None are omitted from the item.

    The card declares serviceID 1 while the returned message carries 60.
    """
    if url is None:
        raise MissingFieldError("url")

    def fill_item(item: ItemBuilder) -> None:
        if cover_url is not None:
            item.picture(cover_url)
        if title is not None:
            item.title(title)
        if content is not None:
            item.summary(content)

    def configure(builder: XmlMessageBuilder) -> None:
        builder.template_id = SHARE_TEMPLATE_ID
        builder.service_id = SHARE_SERVICE_ID
        builder.action = "web"
        builder.brief = SHARE_BRIEF_PREFIX + (title or "")
        builder.url = url
        builder.item(fill_item, layout=2)

    return build_xml_message(configure, service_id=XML_SERVICE_ID)
