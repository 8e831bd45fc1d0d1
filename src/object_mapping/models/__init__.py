"""
Configuration models for object mapping.

This package provides immutable configuration objects.
"""

from .config import (
    ClientConfig,
    ObjectMapperConfig,
)

__all__ = [
    'ClientConfig',
    'ObjectMapperConfig',
]
