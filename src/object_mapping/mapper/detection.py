"""
Runtime detection of installed serialization libraries.

Used by resolution when neither a default object mapper nor a default object
mapper type is configured. Probing never imports the libraries themselves and
results are cached, so it is safe to call repeatedly from any thread.
"""

from functools import lru_cache
from importlib import metadata, util
from typing import Callable, Dict, Optional

from object_mapping.common.logger import get_logger
from object_mapping.enums import ObjectMapperType

LibraryProbe = Callable[[ObjectMapperType], bool]

logger = get_logger()

_MODULE_BY_TYPE: Dict[ObjectMapperType, str] = {
    ObjectMapperType.ORJSON: "orjson",
    ObjectMapperType.PYDANTIC_V2: "pydantic",
    ObjectMapperType.PYDANTIC_V1: "pydantic",
    ObjectMapperType.XMLTODICT: "xmltodict",
}


@lru_cache(maxsize=None)
def pydantic_major_version() -> Optional[int]:
    """Major version of the installed pydantic distribution, None if not installed."""
    try:
        version = metadata.version("pydantic")
    except metadata.PackageNotFoundError:
        return None
    try:
        return int(version.split(".")[0])
    except ValueError:
        return None


@lru_cache(maxsize=None)
def is_library_available(mapper_type: ObjectMapperType) -> bool:
    """
    Check whether the library behind an object mapper type is installed.

    pydantic 2 serves both families: PYDANTIC_V2 natively and PYDANTIC_V1
    through its pydantic.v1 compatibility package.

    Args:
        mapper_type: Family to probe

    Returns:
        True if an object mapper of that family can be built
    """
    if util.find_spec(_MODULE_BY_TYPE[mapper_type]) is None:
        available = False
    elif mapper_type is ObjectMapperType.PYDANTIC_V2:
        major = pydantic_major_version()
        available = major is not None and major >= 2
    elif mapper_type is ObjectMapperType.PYDANTIC_V1:
        available = pydantic_major_version() is not None
    else:
        available = True

    logger.debug(f"Object mapper library {mapper_type.value} available: {available}")
    return available


def clear_detection_cache() -> None:
    """Forget cached probe results (e.g. after installing a library at runtime)."""
    is_library_available.cache_clear()
    pydantic_major_version.cache_clear()
