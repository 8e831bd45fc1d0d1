"""
Content-type helpers used to pick a serialization family for a body.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Tuple
from uuid import UUID

DEFAULT_CHARSET = "utf-8"

_JSON_TYPES = ("application/json", "text/json", "application/javascript", "text/javascript")
_XML_TYPES = ("application/xml", "text/xml", "application/xhtml+xml")

# Bodies of these types are written as-is and never need an object mapper
_PRIMITIVE_TYPES = (str, bytes, bytearray, bool, int, float, Decimal, UUID, Enum)


def parse_content_type(content_type: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a content-type header value into its mime type and charset.

    Args:
        content_type: Header value such as "application/json; charset=UTF-8"

    Returns:
        (mime type lower-cased, charset) with None for missing parts
    """
    if not content_type or not content_type.strip():
        return None, None

    parts = content_type.split(";")
    mime = parts[0].strip().lower() or None
    charset = None
    for param in parts[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"')
    return mime, charset


def charset_of(content_type: Optional[str], default: str = DEFAULT_CHARSET) -> str:
    _, charset = parse_content_type(content_type)
    return charset or default


def is_json(content_type: Optional[str]) -> bool:
    mime, _ = parse_content_type(content_type)
    if mime is None:
        return False
    return mime in _JSON_TYPES or mime.endswith("+json")


def is_xml(content_type: Optional[str]) -> bool:
    mime, _ = parse_content_type(content_type)
    if mime is None:
        return False
    return mime in _XML_TYPES or mime.endswith("+xml")


def needs_object_mapper(content_type: Optional[str]) -> bool:
    """True when the content type is absent, JSON or XML."""
    mime, _ = parse_content_type(content_type)
    return mime is None or is_json(content_type) or is_xml(content_type)


def is_primitive(body: Any) -> bool:
    return body is None or isinstance(body, _PRIMITIVE_TYPES)


def requires_mapping(content_type: Optional[str], body: Any) -> bool:
    """
    Check whether a body has to go through an object mapper.

    Args:
        content_type: Content-type of the body, None if unknown
        body: The body to write

    Returns:
        True for non-primitive bodies whose content type is absent, JSON or XML
    """
    return not is_primitive(body) and needs_object_mapper(content_type)
