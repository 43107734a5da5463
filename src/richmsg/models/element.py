"""
Structured element handed to the protocol encoder.
"""

from typing import Any, Optional

from pydantic import BaseModel

from richmsg.models.rich import LongMessage, RichMessage, ServiceMessage


class RichElement(BaseModel):
    type: str                        # the variant's KEY.type_name
    content: str
    service_id: Optional[int] = None  # absent for LightApp
    res_id: Optional[str] = None      # LongMessage only


def to_element(message: RichMessage) -> dict[str, Any]:
    """Dump a rich message as a dict ready for the encoder. Unset fields are omitted."""
    element = RichElement(
        type=type(message).KEY.type_name,
        content=message.content,
        service_id=message.service_id if isinstance(message, ServiceMessage) else None,
        res_id=message.res_id if isinstance(message, LongMessage) else None,
    )
    return element.model_dump(exclude_none=True)
