"""
Validators module.

Contains all built-in validators organized by category:
- field_validators: presence, format, acceptance, length
- comparison_validators: range, confirmation
- callback_validators: check (sync or async callables)

All validators are automatically registered via decorators.
"""

# Import all validators to trigger registration
from modelkit.validation.validators import field_validators
from modelkit.validation.validators import comparison_validators
from modelkit.validation.validators import callback_validators

from modelkit.validation.validators.field_validators import (
    PresenceValidator,
    FormatValidator,
    AcceptanceValidator,
    LengthValidator,
)
from modelkit.validation.validators.comparison_validators import (
    RangeValidator,
    ConfirmationValidator,
    CONFIRMATION_SUFFIX,
)
from modelkit.validation.validators.callback_validators import CheckValidator

__all__ = [
    'field_validators',
    'comparison_validators',
    'callback_validators',
    'PresenceValidator',
    'FormatValidator',
    'AcceptanceValidator',
    'LengthValidator',
    'RangeValidator',
    'ConfirmationValidator',
    'CONFIRMATION_SUFFIX',
    'CheckValidator',
]
