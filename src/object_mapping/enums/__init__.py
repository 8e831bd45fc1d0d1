"""
Public Enums for the Object Mapping package.

Example Usage:
--------------
    from object_mapping.enums import ObjectMapperType

    config = ObjectMapperConfig(default_object_mapper_type=ObjectMapperType.ORJSON)
"""

from enum import Enum
from typing import List


class ObjectMapperType(Enum):
    """
    Serialization library families an object mapper can be built from.

    Declaration order is the auto-detection priority order.
    """
    ORJSON = "orjson"
    PYDANTIC_V2 = "pydantic_v2"
    PYDANTIC_V1 = "pydantic_v1"
    XMLTODICT = "xmltodict"

    @property
    def supports_json(self) -> bool:
        return self is not ObjectMapperType.XMLTODICT

    @property
    def supports_xml(self) -> bool:
        return self is ObjectMapperType.XMLTODICT

    @classmethod
    def from_value(cls, value) -> "ObjectMapperType":
        """Coerce an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalized or member.name.lower() == normalized:
                    return member
        raise ValueError(f"Unknown object mapper type: {value!r}")

    @classmethod
    def detection_order(cls) -> List["ObjectMapperType"]:
        return list(cls)


__all__ = [
    "ObjectMapperType",
]
