"""
richmsg — rich instant-messaging content for Python.

App cards, JSON/XML service messages, long-message and merged-forward
references, plus a builder for templated XML cards.
"""

from richmsg.builder import ItemBuilder, XmlMessageBuilder, build_xml_message
from richmsg.errors import MissingFieldError, RichMessageError
from richmsg.keys import MessageKey
from richmsg.models.element import RichElement, to_element
from richmsg.models.rich import (
    ForwardMessage,
    JsonMessage,
    LightApp,
    LongMessage,
    RichMessage,
    ServiceMessage,
    XmlMessage,
)
from richmsg.templates import share

__version__ = "0.1.0"
__all__ = [
    "RichMessage",
    "LightApp",
    "ServiceMessage",
    "JsonMessage",
    "XmlMessage",
    "LongMessage",
    "ForwardMessage",
    "MessageKey",
    "RichElement",
    "to_element",
    "ItemBuilder",
    "XmlMessageBuilder",
    "build_xml_message",
    "share",
    "RichMessageError",
    "MissingFieldError",
]
