"""
Tests for ObjectMapperConfig and ClientConfig.
"""

import dataclasses

import pytest

from object_mapping.enums import ObjectMapperType
from object_mapping.errors import NullFactoryError, UnsupportedStrategyError
from object_mapping.mapper.content_type import DEFAULT_CHARSET
from object_mapping.mapper.factories import (
    DefaultOrjsonMapperFactory,
    DefaultPydantic1MapperFactory,
    DefaultPydantic2MapperFactory,
    DefaultXmltodictMapperFactory,
    OrjsonMapperFactory,
    OrjsonSettings,
)
from object_mapping.models.config import ClientConfig, ObjectMapperConfig


class CustomOrjsonFactory(OrjsonMapperFactory):
    def create(self):
        return OrjsonSettings(option=1)


class TestDefaults:
    """A freshly built config has no explicit choice and every built-in factory."""

    def test_no_explicit_mapper_or_type(self):
        config = ObjectMapperConfig()
        assert config.has_default_object_mapper() is False
        assert config.has_default_object_mapper_type() is False
        assert config.default_object_mapper is None
        assert config.default_object_mapper_type is None

    def test_every_family_has_a_factory(self):
        config = ObjectMapperConfig()
        for mapper_type in ObjectMapperType:
            assert config.factory_for(mapper_type) is not None

    def test_builtin_factories(self):
        config = ObjectMapperConfig()
        assert isinstance(config.orjson_factory, DefaultOrjsonMapperFactory)
        assert isinstance(config.pydantic_v2_factory, DefaultPydantic2MapperFactory)
        assert isinstance(config.pydantic_v1_factory, DefaultPydantic1MapperFactory)
        assert isinstance(config.xmltodict_factory, DefaultXmltodictMapperFactory)

    def test_static_constructor_equals_default(self):
        assert ObjectMapperConfig.object_mapper_config() == ObjectMapperConfig()

    def test_convenience_constructors(self, custom_mapper):
        by_type = ObjectMapperConfig(default_object_mapper_type=ObjectMapperType.XMLTODICT)
        by_mapper = ObjectMapperConfig(default_object_mapper=custom_mapper)

        assert by_type == ObjectMapperConfig().with_default_object_mapper_type(ObjectMapperType.XMLTODICT)
        assert by_mapper.default_object_mapper is custom_mapper
        assert by_mapper.has_default_object_mapper_type() is False

    def test_partial_factories_are_completed(self):
        factory = CustomOrjsonFactory()
        config = ObjectMapperConfig(factories={ObjectMapperType.ORJSON: factory})
        assert config.orjson_factory is factory
        assert isinstance(config.xmltodict_factory, DefaultXmltodictMapperFactory)


class TestImmutability:
    """Mutators return new configs and never change the receiver."""

    def test_with_default_object_mapper_type(self):
        config = ObjectMapperConfig()
        derived = config.with_default_object_mapper_type(ObjectMapperType.ORJSON)
        assert derived is not config
        assert derived.default_object_mapper_type is ObjectMapperType.ORJSON
        assert config.default_object_mapper_type is None

    def test_with_default_object_mapper(self, custom_mapper):
        config = ObjectMapperConfig()
        derived = config.with_default_object_mapper(custom_mapper)
        assert derived.default_object_mapper is custom_mapper
        assert config.default_object_mapper is None

    def test_with_factory(self):
        config = ObjectMapperConfig()
        original = config.orjson_factory
        config.with_factory(ObjectMapperType.ORJSON, CustomOrjsonFactory())
        assert config.orjson_factory is original

    def test_fields_are_frozen(self):
        config = ObjectMapperConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.default_object_mapper_type = ObjectMapperType.ORJSON

    def test_factories_are_read_only(self):
        config = ObjectMapperConfig()
        with pytest.raises(TypeError):
            config.factories[ObjectMapperType.ORJSON] = CustomOrjsonFactory()

    def test_derived_configs_do_not_share_factories(self):
        base = ObjectMapperConfig()
        first = base.with_factory(ObjectMapperType.ORJSON, CustomOrjsonFactory())
        second = base.with_factory(ObjectMapperType.ORJSON, CustomOrjsonFactory())
        assert first.orjson_factory is not second.orjson_factory
        assert isinstance(base.orjson_factory, DefaultOrjsonMapperFactory)

    def test_passed_factories_dict_is_copied(self):
        factories = {ObjectMapperType.ORJSON: CustomOrjsonFactory()}
        config = ObjectMapperConfig(factories=factories)
        factories[ObjectMapperType.ORJSON] = CustomOrjsonFactory()
        assert config.orjson_factory is not factories[ObjectMapperType.ORJSON]


class TestHashing:
    """Configs are usable as dict keys and cache arguments."""

    def test_default_configs_hash_equal(self):
        assert hash(ObjectMapperConfig()) == hash(ObjectMapperConfig())

    def test_equal_typed_configs_share_a_dict_slot(self):
        cache = {ObjectMapperConfig(default_object_mapper_type="orjson"): "json"}
        assert cache[ObjectMapperConfig(default_object_mapper_type=ObjectMapperType.ORJSON)] == "json"

    def test_factory_override_still_affects_equality(self):
        custom = ObjectMapperConfig().with_orjson_factory(CustomOrjsonFactory())
        hash(custom)
        assert custom != ObjectMapperConfig()

    def test_client_config_is_hashable(self):
        assert hash(ClientConfig()) == hash(ClientConfig.config())


class TestMapperAndType:
    """Mapper and type are independent fields."""

    def test_setting_type_keeps_mapper(self, custom_mapper):
        config = ObjectMapperConfig(default_object_mapper=custom_mapper)
        derived = config.with_default_object_mapper_type(ObjectMapperType.ORJSON)
        assert derived.default_object_mapper is custom_mapper
        assert derived.default_object_mapper_type is ObjectMapperType.ORJSON

    def test_setting_type_keeps_factories(self):
        factory = CustomOrjsonFactory()
        config = ObjectMapperConfig().with_orjson_factory(factory)
        derived = config.with_default_object_mapper_type(ObjectMapperType.XMLTODICT)
        assert derived.orjson_factory is factory

    def test_none_requests_detection(self):
        config = ObjectMapperConfig(default_object_mapper_type=ObjectMapperType.ORJSON)
        assert config.with_default_object_mapper_type(None).has_default_object_mapper_type() is False
        assert config.with_default_object_mapper(None).has_default_object_mapper() is False

    def test_type_from_string(self):
        assert ObjectMapperConfig(default_object_mapper_type="ORJSON").default_object_mapper_type \
            is ObjectMapperType.ORJSON
        assert ObjectMapperConfig(default_object_mapper_type="pydantic-v2").default_object_mapper_type \
            is ObjectMapperType.PYDANTIC_V2

    def test_unknown_type_string_is_kept(self):
        config = ObjectMapperConfig(default_object_mapper_type="gson")
        assert config.default_object_mapper_type == "gson"
        assert config.has_default_object_mapper_type() is True


class TestFactoryOverride:
    """with_factory replaces exactly one slot."""

    def test_round_trip(self):
        factory = CustomOrjsonFactory()
        config = ObjectMapperConfig()
        derived = config.with_factory(ObjectMapperType.ORJSON, factory)

        assert derived.factory_for(ObjectMapperType.ORJSON) is factory
        for mapper_type in ObjectMapperType:
            if mapper_type is not ObjectMapperType.ORJSON:
                assert derived.factory_for(mapper_type) is config.factory_for(mapper_type)

    def test_string_slot(self):
        factory = CustomOrjsonFactory()
        derived = ObjectMapperConfig().with_factory("orjson", factory)
        assert derived.orjson_factory is factory

    def test_family_shortcut(self):
        factory = CustomOrjsonFactory()
        assert ObjectMapperConfig().with_orjson_factory(factory).orjson_factory is factory

    def test_none_factory_rejected(self):
        config = ObjectMapperConfig()
        derived = config.with_factory(ObjectMapperType.ORJSON, CustomOrjsonFactory())
        with pytest.raises(NullFactoryError, match="OrjsonMapperFactory cannot be None"):
            derived.with_factory(ObjectMapperType.ORJSON, None)
        assert isinstance(config.orjson_factory, DefaultOrjsonMapperFactory)
        assert isinstance(derived.orjson_factory, CustomOrjsonFactory)

    def test_none_factory_rejected_on_construction(self):
        with pytest.raises(NullFactoryError, match="XmltodictMapperFactory cannot be None"):
            ObjectMapperConfig(factories={ObjectMapperType.XMLTODICT: None})

    def test_none_factory_via_shortcut_rejected(self):
        with pytest.raises(NullFactoryError):
            ObjectMapperConfig().with_pydantic_v2_factory(None)

    def test_factory_of_other_family_rejected(self):
        with pytest.raises(TypeError, match="must be a XmltodictMapperFactory"):
            ObjectMapperConfig().with_factory(ObjectMapperType.XMLTODICT, CustomOrjsonFactory())

    def test_unknown_slot_rejected(self):
        with pytest.raises(UnsupportedStrategyError):
            ObjectMapperConfig().with_factory("gson", CustomOrjsonFactory())


class TestFluentChaining:

    def test_and_returns_same_config(self):
        config = ObjectMapperConfig()
        assert config.and_() is config

    def test_chain(self, custom_mapper):
        config = (
            ObjectMapperConfig.object_mapper_config()
            .with_default_object_mapper_type(ObjectMapperType.PYDANTIC_V2)
            .and_()
            .with_default_object_mapper(custom_mapper)
        )
        assert config.default_object_mapper is custom_mapper
        assert config.default_object_mapper_type is ObjectMapperType.PYDANTIC_V2


class TestFromEnv:
    """Default object mapper type read from the environment."""

    ENV_VAR = "OBJECT_MAPPING_TEST_DEFAULT_TYPE"

    def test_reads_variable(self, monkeypatch, tmp_path):
        monkeypatch.setenv(self.ENV_VAR, "xmltodict")
        config = ObjectMapperConfig.from_env(dotenv_path=str(tmp_path / ".env"), env_var=self.ENV_VAR)
        assert config.default_object_mapper_type is ObjectMapperType.XMLTODICT

    def test_unset_variable_means_detection(self, monkeypatch, tmp_path):
        monkeypatch.delenv(self.ENV_VAR, raising=False)
        config = ObjectMapperConfig.from_env(dotenv_path=str(tmp_path / ".env"), env_var=self.ENV_VAR)
        assert config.has_default_object_mapper_type() is False

    def test_empty_variable_means_detection(self, monkeypatch, tmp_path):
        monkeypatch.setenv(self.ENV_VAR, "  ")
        config = ObjectMapperConfig.from_env(dotenv_path=str(tmp_path / ".env"), env_var=self.ENV_VAR)
        assert config.has_default_object_mapper_type() is False

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        # Registers the variable with monkeypatch so the value load_dotenv sets is removed afterwards
        monkeypatch.setenv(self.ENV_VAR, "placeholder")
        monkeypatch.delenv(self.ENV_VAR)
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text(f"{self.ENV_VAR}=pydantic_v1\n")

        config = ObjectMapperConfig.from_env(dotenv_path=str(dotenv_file), env_var=self.ENV_VAR)
        assert config.default_object_mapper_type is ObjectMapperType.PYDANTIC_V1


class TestClientConfig:

    def test_defaults(self):
        config = ClientConfig.config()
        assert config.object_mapper_config == ObjectMapperConfig()
        assert config.default_charset == DEFAULT_CHARSET == "utf-8"

    def test_with_object_mapper_config(self):
        mapper_config = ObjectMapperConfig(default_object_mapper_type=ObjectMapperType.ORJSON)
        config = ClientConfig()
        derived = config.with_object_mapper_config(mapper_config).and_()
        assert derived.object_mapper_config is mapper_config
        assert config.object_mapper_config.has_default_object_mapper_type() is False

    def test_with_default_charset(self):
        assert ClientConfig().with_default_charset("ISO-8859-1").default_charset == "ISO-8859-1"

    def test_none_object_mapper_config_rejected(self):
        with pytest.raises(ValueError, match="Object mapper config cannot be None"):
            ClientConfig(object_mapper_config=None)

    def test_empty_charset_rejected(self):
        with pytest.raises(ValueError, match="Default charset cannot be empty"):
            ClientConfig(default_charset="")
