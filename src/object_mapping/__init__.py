"""
Object Mapping - object mapper configuration and resolution for HTTP bodies.

This package decides how request and response bodies are converted between
domain objects and JSON/XML.

Public API:
-----------
Configuration:
    - ObjectMapperConfig: Immutable object mapper configuration
    - ClientConfig: Configuration aggregate handed to the serialization layer

Resolution:
    - resolve: Pick the object mapper for a body
    - serialize / deserialize: Write and read bodies through the resolved mapper

Errors:
    - ObjectMapperConfigError and its subclasses

Sub-packages:
    - enums: Public enums (ObjectMapperType)
    - mapper: Object mapper protocol, factories and library-backed mappers
    - common: Logging helpers (logging is off until configure_logger() is called)

Example Usage:
--------------
    from object_mapping import ObjectMapperConfig, resolve
    from object_mapping.enums import ObjectMapperType

    config = (
        ObjectMapperConfig.object_mapper_config()
        .with_default_object_mapper_type(ObjectMapperType.ORJSON)
        .and_()
        .with_orjson_factory(MyOrjsonFactory())
    )

    mapper = resolve(config, "application/json")
    body = mapper.serialize({"name": "value"})
"""

from object_mapping.models.config import ClientConfig, ObjectMapperConfig
from object_mapping.errors import (
    NoMapperAvailableError,
    NullFactoryError,
    ObjectMapperConfigError,
    UnsupportedStrategyError,
)
from object_mapping.mapper.base import ObjectMapper
from object_mapping.mapper.resolution import resolve, resolve_object_mapper_type
from object_mapping.mapper.serialization import deserialize, serialize
from object_mapping import enums, mapper, common
from object_mapping.common.logger import disable_logging

# Silent until the application calls configure_logger()
disable_logging()

__all__ = [
    # Configuration
    "ObjectMapperConfig",
    "ClientConfig",
    # Resolution
    "ObjectMapper",
    "resolve",
    "resolve_object_mapper_type",
    "serialize",
    "deserialize",
    # Errors
    "ObjectMapperConfigError",
    "NullFactoryError",
    "UnsupportedStrategyError",
    "NoMapperAvailableError",
    # Sub-packages
    "enums",
    "mapper",
    "common",
]
