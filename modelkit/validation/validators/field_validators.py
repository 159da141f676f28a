"""
Field validators module.

Contains validators that check a single attribute on its own:
- PresenceValidator: attribute must be set and non-empty
- FormatValidator: attribute must match a regex pattern
- AcceptanceValidator: attribute must equal an "accepted" value
- LengthValidator: string length bounds
"""

import re
from typing import Any, Mapping, Optional

from modelkit.validation.core.base import BaseValidator, is_blank_value
from modelkit.validation.core.exceptions import ValidationConfigError
from modelkit.validation.core.registry import register_validator


@register_validator("presence")
class PresenceValidator(BaseValidator):
    """
    Validate that an attribute is set and not empty.

    Options:
        message: "Custom message"  # optional

    Example:
        Product.validates("name", presence=True)
    """

    message_keys = ("empty",)

    def run(self, subject) -> None:
        if is_blank_value(self.value_of(subject)):
            self.add_error(subject, self.messages["empty"])


@register_validator("format")
class FormatValidator(BaseValidator):
    """
    Validate an attribute against a regex pattern.

    Absent values are skipped; combine with presence to require them.

    Options:
        with: "^[A-Z]{3}-\\d{4}$"  # pattern string or compiled pattern
        flags: re.IGNORECASE  # optional, only for string patterns

    Example:
        Product.validates("sku", format={"with": r"^[A-Z]{3}-\\d{4}$"})
    """

    message_keys = ("invalid",)

    def __init__(self, attribute: str, options: Optional[Mapping[str, Any]] = None):
        super().__init__(attribute, options)

        pattern = self.options.get('with', self.options.get('pattern'))
        if pattern is None:
            raise ValidationConfigError(
                f"Format validator on '{attribute}' requires a 'with' pattern"
            )

        if isinstance(pattern, re.Pattern):
            self.pattern = pattern
        else:
            try:
                self.pattern = re.compile(pattern, self.options.get('flags', 0))
            except re.error as e:
                raise ValidationConfigError(f"Invalid regex pattern {pattern!r}: {e}") from e

    def run(self, subject) -> None:
        value = self.value_of(subject)

        if is_blank_value(value):
            return

        if not self.pattern.search(str(value)):
            self.add_error(subject, self.messages["invalid"])


@register_validator("acceptance")
class AcceptanceValidator(BaseValidator):
    """
    Validate that an attribute equals the accepted value.

    Used for terms-of-service style checkboxes.

    Options:
        accept: "1"  # optional, the value that counts as accepted

    Example:
        SignupForm.validates("terms", acceptance=True)
    """

    message_keys = ("accepted",)

    def run(self, subject) -> None:
        accept = self.options.get('accept', "1")
        if self.value_of(subject) != accept:
            self.add_error(subject, self.messages["accepted"])


@register_validator("length")
class LengthValidator(BaseValidator):
    """
    Validate the length of an attribute's string form.

    Each bound reports its own message. An absent value is measured as an
    empty string, so ``minimum`` and ``is`` also reject missing values.

    Options:
        maximum: 40  # optional
        minimum: 2  # optional
        is: 8  # optional, exact length

    Example:
        Product.validates("name", length={"maximum": 40})
    """

    message_keys = ("too_long", "too_short", "wrong_length")

    def run(self, subject) -> None:
        value = self.value_of(subject)
        length = len("" if value is None else str(value))

        maximum = self.options.get('maximum')
        minimum = self.options.get('minimum')
        exact = self.options.get('is')

        if maximum is not None and length > maximum:
            self.add_error(subject, self.messages["too_long"], count=maximum)

        if minimum is not None and length < minimum:
            self.add_error(subject, self.messages["too_short"], count=minimum)

        if exact is not None and length != exact:
            self.add_error(subject, self.messages["wrong_length"], count=exact)
