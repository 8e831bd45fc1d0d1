"""
Object mapper factories, one family per serialization library.

Each family has its own factory base class and its own settings object, so a
factory for one library can never be installed in another library's slot.
The default factories import their library lazily, inside create().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from object_mapping.enums import ObjectMapperType


@dataclass(frozen=True)
class OrjsonSettings:
    """Options passed to orjson.dumps / orjson.loads."""
    option: int = 0
    default: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class Pydantic2Settings:
    """Options passed to pydantic.TypeAdapter dump/validate calls."""
    by_alias: bool = False
    exclude_none: bool = False
    strict: Optional[bool] = None


@dataclass(frozen=True)
class Pydantic1Settings:
    """Options passed to pydantic v1 model.json() / parse_raw_as()."""
    by_alias: bool = False
    exclude_none: bool = False


@dataclass(frozen=True)
class XmltodictSettings:
    """Options passed to xmltodict.unparse / xmltodict.parse."""
    root_tag: str = "root"
    attr_prefix: str = "@"
    cdata_key: str = "#text"
    pretty: bool = False

    def __post_init__(self):
        if not self.root_tag:
            raise ValueError("Root tag cannot be empty")


class ObjectMapperFactory(ABC):
    """Abstract base class for object mapper factories"""

    mapper_type: ObjectMapperType

    @abstractmethod
    def create(self) -> Any:
        """Create the library-specific settings used to build an object mapper"""
        pass


class OrjsonMapperFactory(ObjectMapperFactory):
    mapper_type = ObjectMapperType.ORJSON

    @abstractmethod
    def create(self) -> OrjsonSettings:
        pass


class Pydantic2MapperFactory(ObjectMapperFactory):
    mapper_type = ObjectMapperType.PYDANTIC_V2

    @abstractmethod
    def create(self) -> Pydantic2Settings:
        pass


class Pydantic1MapperFactory(ObjectMapperFactory):
    mapper_type = ObjectMapperType.PYDANTIC_V1

    @abstractmethod
    def create(self) -> Pydantic1Settings:
        pass


class XmltodictMapperFactory(ObjectMapperFactory):
    mapper_type = ObjectMapperType.XMLTODICT

    @abstractmethod
    def create(self) -> XmltodictSettings:
        pass


class _BuiltinFactory:
    """Built-in factories are stateless, so any two of the same class are equal."""

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultOrjsonMapperFactory(_BuiltinFactory, OrjsonMapperFactory):
    """Allows non-string dict keys and treats naive datetimes as UTC."""

    def create(self) -> OrjsonSettings:
        import orjson

        return OrjsonSettings(option=orjson.OPT_NON_STR_KEYS | orjson.OPT_NAIVE_UTC)


class DefaultPydantic2MapperFactory(_BuiltinFactory, Pydantic2MapperFactory):

    def create(self) -> Pydantic2Settings:
        import pydantic  # noqa: F401

        return Pydantic2Settings()


class DefaultPydantic1MapperFactory(_BuiltinFactory, Pydantic1MapperFactory):

    def create(self) -> Pydantic1Settings:
        import pydantic  # noqa: F401

        return Pydantic1Settings()


class DefaultXmltodictMapperFactory(_BuiltinFactory, XmltodictMapperFactory):

    def create(self) -> XmltodictSettings:
        import xmltodict  # noqa: F401

        return XmltodictSettings()


FACTORY_TYPES: Dict[ObjectMapperType, Type[ObjectMapperFactory]] = {
    ObjectMapperType.ORJSON: OrjsonMapperFactory,
    ObjectMapperType.PYDANTIC_V2: Pydantic2MapperFactory,
    ObjectMapperType.PYDANTIC_V1: Pydantic1MapperFactory,
    ObjectMapperType.XMLTODICT: XmltodictMapperFactory,
}

_DEFAULT_FACTORIES: Dict[ObjectMapperType, Type[ObjectMapperFactory]] = {
    ObjectMapperType.ORJSON: DefaultOrjsonMapperFactory,
    ObjectMapperType.PYDANTIC_V2: DefaultPydantic2MapperFactory,
    ObjectMapperType.PYDANTIC_V1: DefaultPydantic1MapperFactory,
    ObjectMapperType.XMLTODICT: DefaultXmltodictMapperFactory,
}


def default_factory(mapper_type: ObjectMapperType) -> ObjectMapperFactory:
    """Return a new built-in factory for the given family"""
    return _DEFAULT_FACTORIES[mapper_type]()


def default_factories() -> Dict[ObjectMapperType, ObjectMapperFactory]:
    """Return one new built-in factory per known family"""
    return {mapper_type: default_factory(mapper_type) for mapper_type in ObjectMapperType}
