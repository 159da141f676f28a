"""
Comparison validators.

Validators that compare an attribute against bounds or another attribute:
- RangeValidator: value must lie within min/max
- ConfirmationValidator: value must equal its companion "_confirmation" field
"""

from decimal import Decimal
from typing import Any, Mapping, Optional

from modelkit.utils.helpers import humanize
from modelkit.validation.core.base import BaseValidator, is_blank_value, is_present
from modelkit.validation.core.registry import register_validator

CONFIRMATION_SUFFIX = "_confirmation"

_NUMBER_TYPES = (int, float, Decimal)


def _is_number(value: Any) -> bool:
    return isinstance(value, _NUMBER_TYPES) and not isinstance(value, bool)


@register_validator("range")
class RangeValidator(BaseValidator):
    """
    Validate that a value is within an inclusive range.

    Bounds may be plain values or callables taking the subject, evaluated
    each time validation runs. Numeric strings are compared as numbers when
    the bounds are numeric.

    Values exposing ``is_before(other)`` and ``is_after(other)`` are compared
    through those methods instead of ``<``/``>`` (legacy date objects).

    Options:
        min: 0  # optional
        max: 1000  # optional

    Example:
        Product.validates("price", range={"min": 0, "max": 999999})
        Booking.validates("ends_on", range={"min": lambda booking: booking.get("starts_on")})
    """

    message_keys = ("greater_than_or_equal_to", "less_than_or_equal_to", "not_a_number")

    def _bound(self, key: str, subject) -> Any:
        bound = self.options.get(key)
        if callable(bound):
            return bound(subject)
        return bound

    @staticmethod
    def _is_legacy_comparable(value: Any) -> bool:
        return callable(getattr(value, 'is_before', None)) and callable(getattr(value, 'is_after', None))

    def run(self, subject) -> None:
        value = self.value_of(subject)

        if is_blank_value(value):
            return

        minimum = self._bound('min', subject)
        maximum = self._bound('max', subject)

        if self._is_legacy_comparable(value):
            too_small = minimum is not None and value.is_before(minimum)
            too_large = maximum is not None and value.is_after(maximum)
        else:
            bounds = [b for b in (minimum, maximum) if b is not None]
            if isinstance(value, str) and bounds and all(_is_number(b) for b in bounds):
                try:
                    value = Decimal(value.strip()) if any(isinstance(b, Decimal) for b in bounds) else float(value)
                except (ValueError, ArithmeticError):
                    self.add_error(subject, self.messages["not_a_number"])
                    return

            try:
                too_small = minimum is not None and value < minimum
                too_large = maximum is not None and value > maximum
            except TypeError:
                self.add_error(subject, self.messages["not_a_number"])
                return

        if too_small:
            self.add_error(subject, self.messages["greater_than_or_equal_to"], count=minimum)

        if too_large:
            self.add_error(subject, self.messages["less_than_or_equal_to"], count=maximum)


@register_validator("confirmation")
class ConfirmationValidator(BaseValidator):
    """
    Validate that an attribute matches its confirmation attribute.

    The error is recorded on the confirmation attribute, which is the field
    the user has to fix.

    Options:
        confirmation_attribute: "email_again"  # optional, default "<attribute>_confirmation"

    Example:
        SignupForm.validates("password", confirmation=True)
    """

    message_keys = ("confirmation",)

    def __init__(self, attribute: str, options: Optional[Mapping[str, Any]] = None):
        super().__init__(attribute, options)
        self.confirmation_attribute = (
            self.options.get('confirmation_attribute') or f"{attribute}{CONFIRMATION_SUFFIX}"
        )

    def run(self, subject) -> None:
        value = self.value_of(subject)

        if not is_present(value):
            return

        if value != subject.get(self.confirmation_attribute):
            self.add_error(
                subject,
                self.messages["confirmation"],
                target=self.confirmation_attribute,
                attribute=humanize(self.attribute)
            )
