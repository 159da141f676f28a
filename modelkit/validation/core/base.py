"""
Base class for validators.

This module provides the foundation for all validators:
- BaseValidator: common construction, conditional execution, messages
- is_blank_value / is_present: the shared notion of an absent value
"""

import operator
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple

from modelkit.i18n import translate
from modelkit.validation.core.exceptions import ValidationConfigError

if TYPE_CHECKING:
    from modelkit.model.base import Model

Predicate = Callable[['Model'], Any]


def is_blank_value(value: Any) -> bool:
    """True for None, zero-length values, and values whose string form is empty."""
    if value is None:
        return True
    if hasattr(value, '__len__'):
        return len(value) == 0
    return str(value) == ""


def is_present(value: Any) -> bool:
    return not is_blank_value(value)


def resolve_condition(condition: Any) -> Optional[Predicate]:
    """
    Turn an ``if`` option into a predicate over the subject.

    A callable is used as-is and receives the subject. A string names a
    zero-argument method on the subject.
    """
    if condition is None:
        return None
    if isinstance(condition, str):
        return operator.methodcaller(condition)
    if callable(condition):
        return condition
    raise ValidationConfigError(
        f"'if' must be a callable or a method name, got {type(condition).__name__}"
    )


class BaseValidator:
    """
    Base class for all validators.

    A validator is bound to one attribute and a read-only options mapping.
    ``validate(subject)`` checks the optional ``if`` predicate and then calls
    ``run(subject)``, which subclasses implement. ``run`` records failures
    through ``subject.add_error`` and returns None, or an awaitable for
    checks that need to wait on something.

    Options common to every validator:
        if: callable(subject) or method name; run only when it returns True
        message: overrides every default message of the validator
        <key>_message: overrides one default message (e.g. too_long_message)

    Example:
        @register_validator("even")
        class EvenValidator(BaseValidator):
            message_keys = ("invalid",)

            def run(self, subject):
                if subject.get(self.attribute) % 2:
                    self.add_error(subject, self.messages["invalid"])
    """

    # Set by @register_validator
    kind: str = "base"

    # Default message keys under errors.messages.*
    message_keys: Tuple[str, ...] = ()

    def __init__(self, attribute: str, options: Optional[Mapping[str, Any]] = None):
        """
        Initialize validator.

        Args:
            attribute: Name of the attribute to validate
            options: Validator-specific settings plus the common options
        """
        self._attribute = attribute
        self._options = MappingProxyType(dict(options or {}))
        self.condition = resolve_condition(self._options.get('if'))
        self.messages = self._resolve_messages()

    @property
    def attribute(self) -> str:
        return self._attribute

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    def _resolve_messages(self) -> Dict[str, str]:
        override = self._options.get('message')
        messages = {}
        for key in self.message_keys:
            messages[key] = (
                self._options.get(f'{key}_message')
                or override
                or translate(f'errors.messages.{key}')
            )
        return messages

    def validate(self, subject: 'Model') -> Any:
        """
        Run the check unless the ``if`` predicate says otherwise.

        Returns:
            Whatever ``run`` returns: None or an awaitable
        """
        if self.condition is not None and self.condition(subject) is not True:
            return None
        return self.run(subject)

    def run(self, subject: 'Model') -> Any:
        """Perform the check. Must be implemented by subclasses."""
        raise NotImplementedError(
            f"{type(self).__name__} does not implement run()"
        )

    def value_of(self, subject: 'Model') -> Any:
        return subject.get(self.attribute)

    def add_error(
        self,
        subject: 'Model',
        message: str,
        target: Optional[str] = None,
        **values: Any
    ) -> None:
        """Record ``message`` (interpolated with ``values``) on ``target`` or our attribute."""
        subject.add_error(target or self.attribute, self._format(message, **values))

    @staticmethod
    def _format(message: str, **values: Any) -> str:
        if not values:
            return message
        try:
            return message.format(**values)
        except (KeyError, IndexError, ValueError):
            # Custom messages may contain braces of their own
            return message

    def __repr__(self) -> str:
        options = ", ".join(f"{k}={v!r}" for k, v in self._options.items())
        if options:
            return f"<{type(self).__name__} {self.attribute!r} {options}>"
        return f"<{type(self).__name__} {self.attribute!r}>"
