"""
Errors raised while configuring or resolving object mappers.

All of them are programmer errors: they are raised synchronously at the call
that detected them and never leave a previously built configuration changed.
"""


class ObjectMapperConfigError(ValueError):
    """Base class for object mapper configuration errors."""
    pass


class NullFactoryError(ObjectMapperConfigError):
    """Raised when a factory slot is given ``None``."""

    def __init__(self, factory_name: str):
        self.factory_name = factory_name
        super().__init__(f"{factory_name} cannot be None")


class UnsupportedStrategyError(ObjectMapperConfigError):
    """Raised when the configured object mapper type has no known family or factory."""

    def __init__(self, mapper_type):
        self.mapper_type = mapper_type
        super().__init__(f"Unsupported object mapper type: {mapper_type!r}")


class NoMapperAvailableError(ObjectMapperConfigError):
    """Raised when auto-detection finds no serialization library for a body that must be mapped."""

    def __init__(self, content_type=None):
        self.content_type = content_type
        if content_type:
            message = (
                f"Cannot map content-type '{content_type}': no supported object mapper "
                f"library is installed"
            )
        else:
            message = "No supported object mapper library is installed"
        super().__init__(message)
