"""
Configuration DTOs for object mapping.

This module provides immutable configuration objects. Every with_* method
returns a new instance; the receiver is never changed.
"""

import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from object_mapping.enums import ObjectMapperType
from object_mapping.errors import NullFactoryError, UnsupportedStrategyError
from object_mapping.mapper.base import ObjectMapper
from object_mapping.mapper.content_type import DEFAULT_CHARSET
from object_mapping.mapper.factories import (
    FACTORY_TYPES,
    ObjectMapperFactory,
    OrjsonMapperFactory,
    Pydantic1MapperFactory,
    Pydantic2MapperFactory,
    XmltodictMapperFactory,
    default_factories,
    default_factory,
)

DEFAULT_TYPE_ENV_VAR = "OBJECT_MAPPER_DEFAULT_TYPE"

MapperTypeLike = Union[ObjectMapperType, str]


def _factory_slot(mapper_type: MapperTypeLike) -> ObjectMapperType:
    try:
        return ObjectMapperType.from_value(mapper_type)
    except ValueError as e:
        raise UnsupportedStrategyError(mapper_type) from e


@dataclass(frozen=True)
class ObjectMapperConfig:
    """
    Configuration for the object mapping functionality.

    With neither a default object mapper nor a default object mapper type,
    a mapper is picked by detecting which serialization library is installed.
    If both are set, the default object mapper wins.

    Attributes:
        default_object_mapper: Mapper used for every body, overrides everything else
        default_object_mapper_type: Serialization family used when no mapper is given
        factories: One factory per family, read-only
    """
    default_object_mapper: Optional[ObjectMapper] = None
    default_object_mapper_type: Optional[MapperTypeLike] = None
    # A read-only mapping cannot be hashed; equality still compares it
    factories: Mapping[ObjectMapperType, ObjectMapperFactory] = field(
        default_factory=default_factories, hash=False
    )

    def __post_init__(self):
        """Validate factories and normalize fields after initialization."""
        if isinstance(self.default_object_mapper_type, str):
            try:
                object.__setattr__(
                    self,
                    'default_object_mapper_type',
                    ObjectMapperType.from_value(self.default_object_mapper_type),
                )
            except ValueError:
                # Kept as given; resolution reports it as unsupported
                pass

        if self.factories is None:
            raise NullFactoryError("factories")

        given = {}
        for mapper_type, factory in self.factories.items():
            slot = _factory_slot(mapper_type)
            if factory is None:
                raise NullFactoryError(FACTORY_TYPES[slot].__name__)
            if not isinstance(factory, FACTORY_TYPES[slot]):
                raise TypeError(
                    f"Factory for {slot.value} must be a {FACTORY_TYPES[slot].__name__}, "
                    f"got {type(factory).__name__}"
                )
            given[slot] = factory

        merged = {
            mapper_type: given[mapper_type] if mapper_type in given else default_factory(mapper_type)
            for mapper_type in ObjectMapperType
        }
        object.__setattr__(self, 'factories', MappingProxyType(merged))

    @classmethod
    def object_mapper_config(cls) -> "ObjectMapperConfig":
        """Default configuration; syntactic sugar for ObjectMapperConfig()."""
        return cls()

    @classmethod
    def from_env(
        cls,
        dotenv_path: Optional[str] = None,
        env_var: str = DEFAULT_TYPE_ENV_VAR,
    ) -> "ObjectMapperConfig":
        """
        Build a configuration whose default object mapper type comes from the environment.

        Values from a .env file are loaded first without overriding variables
        that are already set. An unset or empty variable means auto-detection.

        Args:
            dotenv_path: Path to a .env file, searched for when None
            env_var: Name of the variable holding the object mapper type

        Returns:
            ObjectMapperConfig with default factories
        """
        load_dotenv(dotenv_path)
        value = os.getenv(env_var, "").strip()
        return cls(default_object_mapper_type=value or None)

    def has_default_object_mapper(self) -> bool:
        return self.default_object_mapper is not None

    def has_default_object_mapper_type(self) -> bool:
        return self.default_object_mapper_type is not None

    def with_default_object_mapper_type(
        self, default_object_mapper_type: Optional[MapperTypeLike]
    ) -> "ObjectMapperConfig":
        """
        Use the given serialization family by default.

        Args:
            default_object_mapper_type: The family to use. None enables library detection.
        """
        return replace(self, default_object_mapper_type=default_object_mapper_type)

    def with_default_object_mapper(
        self, default_object_mapper: Optional[ObjectMapper]
    ) -> "ObjectMapperConfig":
        """
        Use the given object mapper for every body.

        Args:
            default_object_mapper: The mapper to use. None enables library detection.
        """
        return replace(self, default_object_mapper=default_object_mapper)

    def factory_for(self, mapper_type: MapperTypeLike) -> ObjectMapperFactory:
        return self.factories[_factory_slot(mapper_type)]

    def with_factory(
        self, mapper_type: MapperTypeLike, factory: ObjectMapperFactory
    ) -> "ObjectMapperConfig":
        """
        Replace the factory of one serialization family.

        Args:
            mapper_type: Family whose factory is replaced
            factory: The new factory, must belong to that family

        Raises:
            NullFactoryError: If factory is None
            TypeError: If factory belongs to another family
        """
        slot = _factory_slot(mapper_type)
        if factory is None:
            raise NullFactoryError(FACTORY_TYPES[slot].__name__)
        factories = dict(self.factories)
        factories[slot] = factory
        return replace(self, factories=factories)

    @property
    def orjson_factory(self) -> OrjsonMapperFactory:
        return self.factories[ObjectMapperType.ORJSON]

    def with_orjson_factory(self, factory: OrjsonMapperFactory) -> "ObjectMapperConfig":
        return self.with_factory(ObjectMapperType.ORJSON, factory)

    @property
    def pydantic_v2_factory(self) -> Pydantic2MapperFactory:
        return self.factories[ObjectMapperType.PYDANTIC_V2]

    def with_pydantic_v2_factory(self, factory: Pydantic2MapperFactory) -> "ObjectMapperConfig":
        return self.with_factory(ObjectMapperType.PYDANTIC_V2, factory)

    @property
    def pydantic_v1_factory(self) -> Pydantic1MapperFactory:
        return self.factories[ObjectMapperType.PYDANTIC_V1]

    def with_pydantic_v1_factory(self, factory: Pydantic1MapperFactory) -> "ObjectMapperConfig":
        return self.with_factory(ObjectMapperType.PYDANTIC_V1, factory)

    @property
    def xmltodict_factory(self) -> XmltodictMapperFactory:
        return self.factories[ObjectMapperType.XMLTODICT]

    def with_xmltodict_factory(self, factory: XmltodictMapperFactory) -> "ObjectMapperConfig":
        return self.with_factory(ObjectMapperType.XMLTODICT, factory)

    def and_(self) -> "ObjectMapperConfig":
        """Syntactic sugar, returns the same config."""
        return self


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration aggregate handed to the serialization layer.

    Attributes:
        object_mapper_config: How bodies are mapped to and from objects
        default_charset: Charset used when a content type does not name one
    """
    object_mapper_config: ObjectMapperConfig = field(default_factory=ObjectMapperConfig)
    default_charset: str = DEFAULT_CHARSET

    def __post_init__(self):
        if self.object_mapper_config is None:
            raise ValueError("Object mapper config cannot be None")
        if not self.default_charset or not self.default_charset.strip():
            raise ValueError("Default charset cannot be empty")

    @classmethod
    def config(cls) -> "ClientConfig":
        return cls()

    def with_object_mapper_config(self, object_mapper_config: ObjectMapperConfig) -> "ClientConfig":
        return replace(self, object_mapper_config=object_mapper_config)

    def with_default_charset(self, default_charset: str) -> "ClientConfig":
        return replace(self, default_charset=default_charset)

    def and_(self) -> "ClientConfig":
        return self
