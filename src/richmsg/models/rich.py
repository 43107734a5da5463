"""
Rich message variants — app cards, service messages (JSON/XML/long/forward).

All variants are immutable. Content is stored verbatim and never validated:
malformed XML or JSON is the caller's concern.
"""

from typing import Any, ClassVar, Literal, Union, overload

from pydantic import BaseModel, ConfigDict

from richmsg.keys import MessageKey

JSON_SERVICE_ID = 1
XML_SERVICE_ID = 60
# Long messages and merged forwards share one service template on the wire.
LONG_SERVICE_ID = 35
FORWARD_SERVICE_ID = 35


class RichMessage(BaseModel):
    """Message content carrying a structured text payload.

    Supports ``len()``, indexing, slicing and ``in`` over ``content``.
    Iterating yields the model fields like any pydantic model; iterate
    ``content`` for characters.
    """

    model_config = ConfigDict(frozen=True)

    KEY: ClassVar[MessageKey[Any]]

    content: str

    def __init__(self, content: str, **data: Any) -> None:
        super().__init__(content=content, **data)

    def content_to_string(self) -> str:
        return self.content

    def __len__(self) -> int:
        return len(self.content)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item in self.content

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> str: ...

    def __getitem__(self, index: Union[int, slice]) -> str:
        return self.content[index]

    def sub_sequence(self, start: int, end: int) -> str:
        """Characters ``start`` (inclusive) to ``end`` (exclusive).

        Unlike slicing, out-of-range bounds raise ``IndexError``.
        """
        if start < 0 or end > len(self.content) or start > end:
            raise IndexError(f"begin {start}, end {end}, length {len(self.content)}")
        return self.content[start:end]

    def compare_to(self, other: str) -> int:
        """Lexicographic comparison of ``content`` with ``other``.

        Returns the code point difference at the first mismatch, or the
        length difference when one is a prefix of the other. Characters
        outside the BMP compare as single code points, not as UTF-16
        surrogate pairs.
        """
        for a, b in zip(self.content, other):
            if a != b:
                return ord(a) - ord(b)
        return len(self.content) - len(other)


class LightApp(RichMessage):
    """Mini-program card such as a music share. Content is usually JSON."""

    def __str__(self) -> str:
        return f"[mirai:app:{self.content}]"


class ServiceMessage(RichMessage):
    """Rich message tagged with the service id that selects the client's template."""

    service_id: int

    def __init__(self, service_id: int, content: str, **data: Any) -> None:
        super().__init__(content, service_id=service_id, **data)

    def __str__(self) -> str:
        return f"[mirai:service:{self.service_id},{self.content}]"


class JsonMessage(ServiceMessage):
    """JSON service message. Some JSON payloads are really a :class:`LightApp`."""

    service_id: Literal[1] = JSON_SERVICE_ID

    def __init__(self, content: str, **data: Any) -> None:
        data.setdefault("service_id", JSON_SERVICE_ID)
        RichMessage.__init__(self, content, **data)


class XmlMessage(ServiceMessage):
    """XML card such as a link share. Build one with :func:`richmsg.builder.build_xml_message`."""

    service_id: int = XML_SERVICE_ID

    def __init__(self, content: str, service_id: int = XML_SERVICE_ID, **data: Any) -> None:
        super().__init__(service_id, content, **data)


class LongMessage(ServiceMessage):
    """Long message. ``res_id`` points at the stored body; ``content`` is the summary card."""

    service_id: Literal[35] = LONG_SERVICE_ID
    res_id: str

    def __init__(self, content: str, res_id: str, **data: Any) -> None:
        data.setdefault("service_id", LONG_SERVICE_ID)
        RichMessage.__init__(self, content, res_id=res_id, **data)


class ForwardMessage(ServiceMessage):
    """Merged-forward summary card."""

    service_id: Literal[35] = FORWARD_SERVICE_ID

    def __init__(self, content: str, **data: Any) -> None:
        data.setdefault("service_id", FORWARD_SERVICE_ID)
        RichMessage.__init__(self, content, **data)


RichMessage.KEY = MessageKey("RichMessage", RichMessage)
LightApp.KEY = MessageKey("LightApp", LightApp)
ServiceMessage.KEY = MessageKey("ServiceMessage", ServiceMessage)
JsonMessage.KEY = MessageKey("JsonMessage", JsonMessage)
XmlMessage.KEY = MessageKey("XmlMessage", XmlMessage)
LongMessage.KEY = MessageKey("LongMessage", LongMessage)
ForwardMessage.KEY = MessageKey("ForwardMessage", ForwardMessage)
