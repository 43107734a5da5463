"""
Message type tags.

Every message variant carries a ``KEY`` naming it for the surrounding
message-content model. The registry that collects keys lives outside this
package.
"""

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class MessageKey(Generic[T]):
    __slots__ = ("type_name", "message_type")

    def __init__(self, type_name: str, message_type: type[T]):
        self.type_name = type_name
        self.message_type = message_type

    def matches(self, message: Any) -> bool:
        """True if ``message`` is an instance of the tagged type."""
        return isinstance(message, self.message_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageKey):
            return NotImplemented
        return self.type_name == other.type_name and self.message_type is other.message_type

    def __hash__(self) -> int:
        return hash((self.type_name, self.message_type))

    def __repr__(self) -> str:
        return f"MessageKey({self.type_name!r})"
