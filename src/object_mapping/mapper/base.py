"""
Object mapper protocol.

Anything that can turn a domain object into body bytes and back can be set as
the default object mapper of an ObjectMapperConfig. The configuration layer
only stores and forwards it.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ObjectMapper(Protocol):
    """
    Protocol for object mappers.

    Allows custom mappers (hand-written, mock mappers for testing, etc.)
    to be used wherever a library-backed mapper would be.
    """

    def serialize(self, obj: Any) -> bytes:
        """
        Serialize an object to a request body.

        Args:
            obj: The object to serialize

        Returns:
            Serialized body bytes
        """
        ...

    def deserialize(self, data: bytes, target_type: Optional[type] = None) -> Any:
        """
        Deserialize a response body.

        Args:
            data: Body bytes (or text)
            target_type: Type to build from the body, None for plain containers

        Returns:
            The deserialized object
        """
        ...
