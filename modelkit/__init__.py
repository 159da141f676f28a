"""
modelkit - attribute models with declarative, async-aware validation.

Usage:
    from modelkit import Model

    class SignupForm(Model):
        accessible = ("email", "password", "password_confirmation", "terms")
        validations = {
            "email": {"presence": True, "format": {"with": r"^[^@\\s]+@[^@\\s]+$"}},
            "password": {"length": {"minimum": 8}, "confirmation": True},
            "terms": {"acceptance": True},
        }

    form = SignupForm(email="a@example.com")
    await form.validate()
    if form.errors:
        print(form.full_messages())
"""

from modelkit.model import Model, BASE, AttributeAccessor, EventEmitter
from modelkit.validation import (
    BaseValidator,
    ValidationEngine,
    ValidationConfigLoader,
    ValidationConfigError,
    UnknownValidatorError,
    ValidationRegistry,
    register_validator,
    build_validator,
)

__version__ = "1.0.0"

__all__ = [
    'Model',
    'BASE',
    'AttributeAccessor',
    'EventEmitter',
    'BaseValidator',
    'ValidationEngine',
    'ValidationConfigLoader',
    'ValidationConfigError',
    'UnknownValidatorError',
    'ValidationRegistry',
    'register_validator',
    'build_validator',
]
