"""
Shared fixtures: stub factories that never import a serialization library,
and a probe builder for simulating installed libraries.
"""

import pytest

from object_mapping.enums import ObjectMapperType
from object_mapping.mapper.detection import clear_detection_cache
from object_mapping.mapper.factories import (
    OrjsonMapperFactory,
    OrjsonSettings,
    Pydantic1MapperFactory,
    Pydantic1Settings,
    Pydantic2MapperFactory,
    Pydantic2Settings,
    XmltodictMapperFactory,
    XmltodictSettings,
)
from object_mapping.models.config import ObjectMapperConfig


class StubOrjsonFactory(OrjsonMapperFactory):
    def create(self):
        return OrjsonSettings()


class StubPydantic2Factory(Pydantic2MapperFactory):
    def create(self):
        return Pydantic2Settings()


class StubPydantic1Factory(Pydantic1MapperFactory):
    def create(self):
        return Pydantic1Settings()


class StubXmltodictFactory(XmltodictMapperFactory):
    def create(self):
        return XmltodictSettings()


class RecordingMapper:
    """Custom object mapper that records what it was asked to do."""

    def __init__(self):
        self.serialized = []
        self.deserialized = []

    def serialize(self, obj):
        self.serialized.append(obj)
        return b"custom"

    def deserialize(self, data, target_type=None):
        self.deserialized.append((data, target_type))
        return {"custom": True}


@pytest.fixture
def stub_config():
    """Default configuration whose factories never touch a real library."""
    return ObjectMapperConfig(factories={
        ObjectMapperType.ORJSON: StubOrjsonFactory(),
        ObjectMapperType.PYDANTIC_V2: StubPydantic2Factory(),
        ObjectMapperType.PYDANTIC_V1: StubPydantic1Factory(),
        ObjectMapperType.XMLTODICT: StubXmltodictFactory(),
    })


@pytest.fixture
def custom_mapper():
    return RecordingMapper()


@pytest.fixture
def probe_for():
    """Build a probe reporting only the given families as installed."""
    def build(*installed):
        available = set(installed)
        return lambda mapper_type: mapper_type in available
    return build


@pytest.fixture
def fresh_detection_cache():
    clear_detection_cache()
    yield
    clear_detection_cache()
