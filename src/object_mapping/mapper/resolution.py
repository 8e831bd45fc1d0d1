"""
Object mapper resolution.

Decides which object mapper the serialization layer uses for a body:

1. The configured default object mapper, unconditionally.
2. Otherwise a mapper built by the factory of the configured default object
   mapper type.
3. Otherwise a mapper built by the factory of the first installed library,
   probed in ObjectMapperType declaration order and restricted to the
   families that can handle the content type.

Each step only applies when the previous one has nothing configured.
"""

from typing import List, Optional

from object_mapping.common.logger import get_logger
from object_mapping.enums import ObjectMapperType
from object_mapping.errors import NoMapperAvailableError, UnsupportedStrategyError
from object_mapping.mapper.base import ObjectMapper
from object_mapping.mapper.content_type import (
    DEFAULT_CHARSET,
    charset_of,
    is_json,
    is_xml,
    needs_object_mapper,
)
from object_mapping.mapper.detection import LibraryProbe, is_library_available
from object_mapping.mapper.mappers import MAPPER_CLASSES, create_object_mapper
from object_mapping.models.config import ObjectMapperConfig

logger = get_logger()


def candidate_types(content_type: Optional[str] = None) -> List[ObjectMapperType]:
    """
    Families that can handle a content type, in detection order.

    Args:
        content_type: Content-type of the body, None if unknown

    Returns:
        JSON families for JSON content, XML families for XML content,
        every family otherwise
    """
    if is_json(content_type):
        return [t for t in ObjectMapperType.detection_order() if t.supports_json]
    if is_xml(content_type):
        return [t for t in ObjectMapperType.detection_order() if t.supports_xml]
    return ObjectMapperType.detection_order()


def _explicit_type(config: ObjectMapperConfig) -> ObjectMapperType:
    value = config.default_object_mapper_type
    try:
        mapper_type = ObjectMapperType.from_value(value)
    except ValueError as e:
        raise UnsupportedStrategyError(value) from e
    if mapper_type not in config.factories or mapper_type not in MAPPER_CLASSES:
        raise UnsupportedStrategyError(value)
    return mapper_type


def resolve_object_mapper_type(
    config: ObjectMapperConfig,
    content_type: Optional[str] = None,
    *,
    probe: Optional[LibraryProbe] = None,
) -> Optional[ObjectMapperType]:
    """
    Pick the serialization family resolve() would build a mapper from.

    Args:
        config: Object mapper configuration
        content_type: Content-type of the body, None if unknown
        probe: Library availability check, defaults to is_library_available

    Returns:
        The family, or None when the default object mapper is used or when
        nothing is installed and the content type does not need mapping

    Raises:
        UnsupportedStrategyError: If the default object mapper type is unknown
        NoMapperAvailableError: If nothing is installed and the content type
            is absent, JSON or XML
    """
    if config.has_default_object_mapper():
        return None

    if config.has_default_object_mapper_type():
        return _explicit_type(config)

    probe = probe or is_library_available
    for mapper_type in candidate_types(content_type):
        if probe(mapper_type):
            logger.debug(f"Detected object mapper library {mapper_type.value} for content-type {content_type!r}")
            return mapper_type

    if needs_object_mapper(content_type):
        logger.warning(f"No object mapper library installed for content-type {content_type!r}")
        raise NoMapperAvailableError(content_type)
    return None


def resolve(
    config: ObjectMapperConfig,
    content_type: Optional[str] = None,
    *,
    probe: Optional[LibraryProbe] = None,
    default_charset: str = DEFAULT_CHARSET,
) -> Optional[ObjectMapper]:
    """
    Resolve the object mapper to use for a body.

    Args:
        config: Object mapper configuration
        content_type: Content-type of the body, None if unknown. Its charset
            parameter is passed to library-backed mappers.
        probe: Library availability check, defaults to is_library_available
        default_charset: Charset used when the content type names none

    Returns:
        The configured default object mapper, a library-backed mapper, or
        None when nothing is installed and the content type does not need mapping

    Raises:
        UnsupportedStrategyError: If the default object mapper type is unknown
        NoMapperAvailableError: If nothing is installed and the content type
            is absent, JSON or XML
    """
    if config.has_default_object_mapper():
        logger.debug(f"Using default object mapper {config.default_object_mapper!r}")
        return config.default_object_mapper

    mapper_type = resolve_object_mapper_type(config, content_type, probe=probe)
    if mapper_type is None:
        return None

    settings = config.factory_for(mapper_type).create()
    mapper = create_object_mapper(mapper_type, settings, charset=charset_of(content_type, default_charset))
    logger.debug(f"Resolved {mapper!r} for content-type {content_type!r}")
    return mapper
