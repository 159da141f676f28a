"""
Validation core module.

Contains base classes, registries, and configuration loading for the
validation system.
"""

from modelkit.validation.core.base import BaseValidator, is_blank_value, is_present
from modelkit.validation.core.exceptions import (
    ModelkitException,
    ValidationConfigError,
    UnknownValidatorError,
)
from modelkit.validation.core.registry import (
    VALIDATOR_REGISTRY,
    MODEL_REGISTRY,
    ValidationRegistry,
    register_validator,
    get_validator,
    build_validator,
)

__all__ = [
    'BaseValidator',
    'is_blank_value',
    'is_present',
    'ModelkitException',
    'ValidationConfigError',
    'UnknownValidatorError',
    'VALIDATOR_REGISTRY',
    'MODEL_REGISTRY',
    'ValidationRegistry',
    'register_validator',
    'get_validator',
    'build_validator',
]
