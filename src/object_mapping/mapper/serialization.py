"""
Body serialization for the HTTP layer.

Writes request bodies and reads response bodies through the object mapper
that resolution picks for the body's content type.
"""

from enum import Enum
from typing import Any, Optional, Union

from object_mapping.errors import NoMapperAvailableError
from object_mapping.mapper.content_type import charset_of, is_primitive
from object_mapping.mapper.detection import LibraryProbe
from object_mapping.mapper.resolution import resolve
from object_mapping.models.config import ClientConfig, ObjectMapperConfig

AnyConfig = Union[ClientConfig, ObjectMapperConfig, None]


def _split_config(config: AnyConfig):
    if config is None:
        config = ClientConfig()
    if isinstance(config, ObjectMapperConfig):
        config = ClientConfig(object_mapper_config=config)
    return config.object_mapper_config, config.default_charset


def serialize(
    body: Any,
    content_type: Optional[str] = None,
    config: AnyConfig = None,
    *,
    probe: Optional[LibraryProbe] = None,
) -> bytes:
    """
    Serialize a request body.

    Bytes are sent as-is and primitives as their text; an enum member is
    written as its value. Anything else goes through the resolved object
    mapper; when the content type does not need one and no library is
    installed, its text is sent instead.

    Args:
        body: The request body
        content_type: Content-type of the body, None if unknown
        config: ClientConfig or ObjectMapperConfig, defaults when None
        probe: Library availability check

    Returns:
        Body bytes
    """
    mapper_config, default_charset = _split_config(config)
    charset = charset_of(content_type, default_charset)

    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if body is None:
        return b""
    if isinstance(body, Enum):
        body = body.value
    if is_primitive(body):
        return str(body).encode(charset)

    mapper = resolve(mapper_config, content_type, probe=probe, default_charset=default_charset)
    if mapper is None:
        return str(body).encode(charset)
    return mapper.serialize(body)


def deserialize(
    data: Union[bytes, str],
    target_type: Optional[type] = None,
    content_type: Optional[str] = None,
    config: AnyConfig = None,
    *,
    probe: Optional[LibraryProbe] = None,
) -> Any:
    """
    Deserialize a response body.

    Args:
        data: Body bytes or text
        target_type: Type to build, None for plain containers
        content_type: Content-type of the body, None if unknown
        config: ClientConfig or ObjectMapperConfig, defaults when None
        probe: Library availability check

    Returns:
        The deserialized object

    Raises:
        NoMapperAvailableError: If no object mapper can be resolved
    """
    mapper_config, default_charset = _split_config(config)
    mapper = resolve(mapper_config, content_type, probe=probe, default_charset=default_charset)
    if mapper is None:
        raise NoMapperAvailableError(content_type)
    return mapper.deserialize(data, target_type)
