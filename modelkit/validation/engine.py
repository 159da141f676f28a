"""
ValidationEngine - runs a model's validators and joins their results.

Models call ``start`` to invoke every validator of their class (synchronous
checks finish immediately) and then await ``settle`` to wait for the
asynchronous ones.
"""

import asyncio
import inspect
from typing import TYPE_CHECKING, Any, List, Tuple

from modelkit.i18n import translate
from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.registry import MODEL_REGISTRY, ValidationRegistry
from modelkit.utils.logger import setup_logger, log_error

# Import validators to trigger registration
from modelkit.validation import validators  # noqa: F401

if TYPE_CHECKING:
    from modelkit.model.base import Model

logger = setup_logger(__name__)

Invocation = Tuple[BaseValidator, Any]


class Settled:
    """Awaitable that has already resolved to ``value``."""

    def __init__(self, value: Any):
        self.value = value

    def __await__(self):
        return self.value
        yield  # makes __await__ a generator


class ValidationEngine:
    """
    Fan-out / fan-in executor for model validators.

    Orchestrates a validation pass by:
    1. Looking up the effective validators of the subject's class
    2. Invoking each one against the subject
    3. Waiting for every pending (awaitable) result to settle

    Failures of the data are recorded on the subject by the validators
    themselves. A validator that raises, synchronously or once awaited, is
    logged and recorded as an error on its attribute; NotImplementedError
    and cancellation propagate.

    Usage:
        engine = ValidationEngine()
        invocations = engine.start(product)
        await engine.settle(product, invocations)
    """

    def __init__(self, registry: ValidationRegistry = MODEL_REGISTRY):
        """
        Initialize validation engine.

        Args:
            registry: Where model classes keep their validators
        """
        self.registry = registry

    def start(self, subject: 'Model') -> List[Invocation]:
        """
        Invoke every validator for the subject's class.

        A validator that raises is logged and recorded like a failed
        asynchronous one; NotImplementedError propagates.

        Returns:
            (validator, result) pairs; results are None or awaitables
        """
        validators = self.registry.validators_for(type(subject))
        logger.debug(
            f"Validating {type(subject).__name__} with {len(validators)} validators"
        )

        invocations: List[Invocation] = []
        for validator in validators:
            try:
                result = validator.validate(subject)
            except NotImplementedError:
                raise
            except Exception as e:
                self._record_failure(subject, validator, e)
                continue
            invocations.append((validator, result))

        return invocations

    @staticmethod
    def has_pending(invocations: List[Invocation]) -> bool:
        """True if any result still has to be awaited."""
        return any(inspect.isawaitable(result) for _, result in invocations)

    async def settle(self, subject: 'Model', invocations: List[Invocation]) -> None:
        """
        Wait until every pending result has settled.

        Never raises because of invalid data.
        """
        pending = [
            (validator, result) for validator, result in invocations
            if inspect.isawaitable(result)
        ]

        if not pending:
            return

        logger.debug(f"Waiting on {len(pending)} asynchronous validators")
        outcomes = await asyncio.gather(
            *(result for _, result in pending),
            return_exceptions=True
        )

        for (validator, _), outcome in zip(pending, outcomes):
            if not isinstance(outcome, BaseException):
                continue

            if isinstance(outcome, (NotImplementedError, asyncio.CancelledError)):
                raise outcome

            self._record_failure(subject, validator, outcome)

    @staticmethod
    def _record_failure(subject: 'Model', validator: BaseValidator, error: BaseException) -> None:
        log_error(logger, error, f"Validator {validator!r} failed")
        subject.add_error(
            validator.attribute,
            translate('errors.messages.validator_failed')
        )

    def get_validators(self, model_cls: type) -> List[BaseValidator]:
        """Effective validators for a model class."""
        return self.registry.validators_for(model_cls)
