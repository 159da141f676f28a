"""
Callback validators.

Validators that delegate the decision to user code, which may be
asynchronous (e.g. a server-side uniqueness lookup).
"""

import inspect
from typing import Any, Awaitable, Mapping, Optional

from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.exceptions import ValidationConfigError
from modelkit.validation.core.registry import register_validator
from modelkit.utils.logger import setup_logger

logger = setup_logger(__name__)


@register_validator("check")
class CheckValidator(BaseValidator):
    """
    Validate with a callable ``(value, subject) -> bool``.

    When the callable returns an awaitable, ``run`` returns an awaitable too
    and the error (if any) is recorded once it resolves.

    Options:
        with: callable or coroutine function  # required

    Example:
        async def email_is_free(value, user):
            return not await directory.exists(email=value)

        User.validates("email", check={"with": email_is_free, "message": "is taken"})
    """

    message_keys = ("invalid",)

    def __init__(self, attribute: str, options: Optional[Mapping[str, Any]] = None):
        super().__init__(attribute, options)

        self.check = self.options.get('with')
        if not callable(self.check):
            raise ValidationConfigError(
                f"Check validator on '{attribute}' requires a callable 'with' option"
            )

    def run(self, subject) -> Optional[Awaitable[None]]:
        outcome = self.check(self.value_of(subject), subject)

        if inspect.isawaitable(outcome):
            return self._settle(subject, outcome)

        self._record(subject, outcome)
        return None

    async def _settle(self, subject, outcome: Awaitable[Any]) -> None:
        passed = await outcome
        logger.debug(f"Async check on '{self.attribute}' settled: {bool(passed)}")
        self._record(subject, passed)

    def _record(self, subject, passed: Any) -> None:
        if not passed:
            self.add_error(subject, self.messages["invalid"])
