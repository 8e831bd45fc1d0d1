"""
Library-backed object mappers.

Each mapper is a thin adapter over one serialization library, bound to the
settings its family's factory created and to the charset of the body.
"""

import dataclasses
import importlib
import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Optional, Type, Union, get_origin

from object_mapping.enums import ObjectMapperType
from object_mapping.mapper.content_type import DEFAULT_CHARSET
from object_mapping.mapper.factories import (
    OrjsonSettings,
    Pydantic1Settings,
    Pydantic2Settings,
    XmltodictSettings,
)

Body = Union[bytes, str]


def _build(value: Any, target_type: Optional[type]) -> Any:
    """Turn a decoded container into target_type when it is a plain class."""
    if target_type is None or target_type is Any or get_origin(target_type) is not None:
        return value
    if isinstance(value, target_type):
        return value
    if isinstance(value, dict):
        return target_type(**value)
    return target_type(value)


class LibraryObjectMapper(ABC):
    """
    Base class for object mappers bound to a serialization library.

    Attributes:
        mapper_type: Family the mapper belongs to
        settings: Settings created by the family's factory
        charset: Charset used to encode and decode text bodies
    """

    mapper_type: ObjectMapperType
    settings_type: type

    def __init__(self, settings, charset: str = DEFAULT_CHARSET):
        if not isinstance(settings, self.settings_type):
            raise TypeError(
                f"{type(self).__name__} requires {self.settings_type.__name__}, "
                f"got {type(settings).__name__}"
            )
        self.settings = settings
        self.charset = charset or DEFAULT_CHARSET

    @abstractmethod
    def serialize(self, obj: Any) -> bytes:
        pass

    @abstractmethod
    def deserialize(self, data: Body, target_type: Optional[type] = None) -> Any:
        pass

    def _text(self, data: Body) -> str:
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).decode(self.charset)
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(charset={self.charset!r}, settings={self.settings!r})"


class OrjsonObjectMapper(LibraryObjectMapper):
    mapper_type = ObjectMapperType.ORJSON
    settings_type = OrjsonSettings

    def serialize(self, obj: Any) -> bytes:
        import orjson

        data = orjson.dumps(obj, default=self.settings.default, option=self.settings.option)
        # orjson always emits UTF-8
        if self.charset.lower().replace("_", "-") in ("utf-8", "utf8"):
            return data
        return data.decode("utf-8").encode(self.charset)

    def deserialize(self, data: Body, target_type: Optional[type] = None) -> Any:
        import orjson

        return _build(orjson.loads(self._text(data)), target_type)


class Pydantic2ObjectMapper(LibraryObjectMapper):
    mapper_type = ObjectMapperType.PYDANTIC_V2
    settings_type = Pydantic2Settings

    def serialize(self, obj: Any) -> bytes:
        from pydantic import TypeAdapter

        text = TypeAdapter(type(obj)).dump_json(
            obj,
            by_alias=self.settings.by_alias,
            exclude_none=self.settings.exclude_none,
        ).decode("utf-8")
        return text.encode(self.charset)

    def deserialize(self, data: Body, target_type: Optional[type] = None) -> Any:
        from pydantic import TypeAdapter

        adapter = TypeAdapter(target_type if target_type is not None else Any)
        return adapter.validate_json(self._text(data), strict=self.settings.strict)


class Pydantic1ObjectMapper(LibraryObjectMapper):
    mapper_type = ObjectMapperType.PYDANTIC_V1
    settings_type = Pydantic1Settings

    @staticmethod
    def _module_name() -> str:
        from object_mapping.mapper.detection import pydantic_major_version

        major = pydantic_major_version()
        return "pydantic.v1" if major is not None and major >= 2 else "pydantic"

    def serialize(self, obj: Any) -> bytes:
        name = self._module_name()
        v1 = importlib.import_module(name)
        if isinstance(obj, v1.BaseModel):
            text = obj.json(by_alias=self.settings.by_alias, exclude_none=self.settings.exclude_none)
        else:
            encoders = importlib.import_module(f"{name}.json")
            text = json.dumps(obj, default=encoders.pydantic_encoder)
        return text.encode(self.charset)

    def deserialize(self, data: Body, target_type: Optional[type] = None) -> Any:
        v1 = importlib.import_module(self._module_name())
        return v1.parse_raw_as(
            target_type if target_type is not None else Any,
            data,
            encoding=self.charset,
        )


class XmltodictObjectMapper(LibraryObjectMapper):
    mapper_type = ObjectMapperType.XMLTODICT
    settings_type = XmltodictSettings

    def serialize(self, obj: Any) -> bytes:
        import xmltodict

        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            obj = dataclasses.asdict(obj)
        if isinstance(obj, Mapping) and len(obj) == 1:
            document = dict(obj)
        elif isinstance(obj, (list, tuple)):
            # A document has exactly one root element
            document = {self.settings.root_tag: {"item": list(obj)}}
        else:
            document = {self.settings.root_tag: obj}
        text = xmltodict.unparse(
            document,
            encoding=self.charset,
            pretty=self.settings.pretty,
            attr_prefix=self.settings.attr_prefix,
            cdata_key=self.settings.cdata_key,
        )
        return text.encode(self.charset)

    def deserialize(self, data: Body, target_type: Optional[type] = None) -> Any:
        import xmltodict

        document = xmltodict.parse(
            data,
            encoding=self.charset,
            attr_prefix=self.settings.attr_prefix,
            cdata_key=self.settings.cdata_key,
        )
        if target_type is None or target_type is dict:
            return document
        # Unwrap the root element before building a domain object
        if len(document) == 1:
            document = next(iter(document.values()))
        return _build(document, target_type)


MAPPER_CLASSES: Dict[ObjectMapperType, Type[LibraryObjectMapper]] = {
    ObjectMapperType.ORJSON: OrjsonObjectMapper,
    ObjectMapperType.PYDANTIC_V2: Pydantic2ObjectMapper,
    ObjectMapperType.PYDANTIC_V1: Pydantic1ObjectMapper,
    ObjectMapperType.XMLTODICT: XmltodictObjectMapper,
}


def create_object_mapper(
    mapper_type: ObjectMapperType,
    settings,
    charset: str = DEFAULT_CHARSET,
) -> LibraryObjectMapper:
    """
    Build the object mapper for a family from its factory's settings.

    Args:
        mapper_type: Family of the mapper to build
        settings: Settings returned by the family's factory
        charset: Charset of the body

    Returns:
        LibraryObjectMapper tagged with mapper_type
    """
    return MAPPER_CLASSES[mapper_type](settings, charset=charset)
