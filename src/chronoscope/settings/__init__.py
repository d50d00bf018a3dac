"""
Settings schema support (dataclass settings with field validation).
"""

from .base_settings import (
    BaseSettings,
    FieldValidator,
    ValidationResult,
    validated_field,
)

__all__ = [
    'BaseSettings',
    'FieldValidator',
    'ValidationResult',
    'validated_field',
]
