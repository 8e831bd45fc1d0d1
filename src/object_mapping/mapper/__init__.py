"""
Object mappers, their factories and mapper resolution.

Example Usage:
--------------
    from object_mapping.mapper import ObjectMapper, resolve

    mapper = resolve(config, "application/json")
    body = mapper.serialize({"name": "value"})
"""

from object_mapping.mapper.base import ObjectMapper
from object_mapping.mapper.content_type import (
    is_json,
    is_xml,
    parse_content_type,
    requires_mapping,
)
from object_mapping.mapper.detection import (
    LibraryProbe,
    clear_detection_cache,
    is_library_available,
)
from object_mapping.mapper.factories import (
    DefaultOrjsonMapperFactory,
    DefaultPydantic1MapperFactory,
    DefaultPydantic2MapperFactory,
    DefaultXmltodictMapperFactory,
    ObjectMapperFactory,
    OrjsonMapperFactory,
    OrjsonSettings,
    Pydantic1MapperFactory,
    Pydantic1Settings,
    Pydantic2MapperFactory,
    Pydantic2Settings,
    XmltodictMapperFactory,
    XmltodictSettings,
)
from object_mapping.mapper.mappers import (
    LibraryObjectMapper,
    OrjsonObjectMapper,
    Pydantic1ObjectMapper,
    Pydantic2ObjectMapper,
    XmltodictObjectMapper,
    create_object_mapper,
)

# Resolution depends on models.config, which depends on this package;
# load it lazily to break the circular import
_LAZY = {
    "resolve": "object_mapping.mapper.resolution",
    "resolve_object_mapper_type": "object_mapping.mapper.resolution",
    "serialize": "object_mapping.mapper.serialization",
    "deserialize": "object_mapping.mapper.serialization",
}


def __getattr__(name: str):
    if name in _LAZY:
        import importlib

        return getattr(importlib.import_module(_LAZY[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ObjectMapper",
    "LibraryProbe",
    "is_library_available",
    "clear_detection_cache",
    "is_json",
    "is_xml",
    "parse_content_type",
    "requires_mapping",
    "ObjectMapperFactory",
    "OrjsonMapperFactory",
    "Pydantic2MapperFactory",
    "Pydantic1MapperFactory",
    "XmltodictMapperFactory",
    "DefaultOrjsonMapperFactory",
    "DefaultPydantic2MapperFactory",
    "DefaultPydantic1MapperFactory",
    "DefaultXmltodictMapperFactory",
    "OrjsonSettings",
    "Pydantic2Settings",
    "Pydantic1Settings",
    "XmltodictSettings",
    "LibraryObjectMapper",
    "OrjsonObjectMapper",
    "Pydantic2ObjectMapper",
    "Pydantic1ObjectMapper",
    "XmltodictObjectMapper",
    "create_object_mapper",
    "resolve",
    "resolve_object_mapper_type",
    "serialize",
    "deserialize",
]
