"""
Validation service module.

Main components:
- BaseValidator: base class for all validators
- Built-in validators: presence, format, range, acceptance, length,
  confirmation, check
- ValidationRegistry: per-model-class declarations, inheritance aware
- ValidationEngine: runs a model's validators and joins async results
- ValidationConfigLoader: declares rules from YAML files

Usage:
    from modelkit.validation import register_validator, BaseValidator

    @register_validator("even")
    class EvenValidator(BaseValidator):
        message_keys = ("invalid",)

        def run(self, subject):
            if subject.get(self.attribute) % 2:
                self.add_error(subject, self.messages["invalid"])
"""

from modelkit.validation.engine import ValidationEngine
from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.config_loader import ValidationConfigLoader
from modelkit.validation.core.exceptions import ValidationConfigError, UnknownValidatorError
from modelkit.validation.core.registry import (
    register_validator,
    build_validator,
    list_validators,
    ValidationRegistry,
    VALIDATOR_REGISTRY,
    MODEL_REGISTRY,
)

__all__ = [
    'ValidationEngine',
    'BaseValidator',
    'ValidationConfigLoader',
    'ValidationConfigError',
    'UnknownValidatorError',
    'register_validator',
    'build_validator',
    'list_validators',
    'ValidationRegistry',
    'VALIDATOR_REGISTRY',
    'MODEL_REGISTRY',
]
