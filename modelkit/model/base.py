"""
Model - base class for validated domain entities.

Subclasses declare which attributes may be mass-assigned and which rules
apply, either in the class body or through class methods:

    class Product(Model):
        accessible = ("name", "price")
        validations = {
            "name": {"presence": True, "length": {"maximum": 40}},
            "price": {"range": {"min": 0}},
        }

    Product.validates("sku", format={"with": r"^[A-Z]{3}-\\d{4}$"}, if_="is_listed")

    product = Product({"name": "", "price": -1})
    await product.validate()
    product.errors  # {"name": ["can't be empty"], "price": [...]}
"""

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Sequence

from modelkit.i18n import translate
from modelkit.model.attributes import AttributeAccessor
from modelkit.model.events import EventEmitter
from modelkit.utils.helpers import humanize, to_plain
from modelkit.utils.logger import setup_logger
from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.registry import (
    MODEL_REGISTRY,
    ValidationRegistry,
    build_validator,
)
from modelkit.validation.engine import Invocation, Settled, ValidationEngine

logger = setup_logger(__name__)

# Errors that concern the whole object rather than one attribute
BASE = "base"


class Model(AttributeAccessor, EventEmitter):
    """
    Attribute container that validates itself.

    Events:
        initialized                  after construction
        change, change:{attr}        after a non-clean set
        validate                     a validation pass started
        invalid:{attr}               attribute has errors (messages as payload)
        valid / invalid              a validation pass finished
        touched:{attr}, untouched:{attr}

    Validation never raises because of bad data; results are in ``errors``
    and reported through events.
    """

    BASE = BASE

    registry: ValidationRegistry = MODEL_REGISTRY

    # Class-body declarations; only the declaring class's own values are read
    accessible: Sequence[str] = ()
    validations: Mapping[str, Mapping[str, Any]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.registry.register(cls)

        own = cls.__dict__
        cls.attr_accessible(*own.get('accessible', ()))
        for attribute, kinds in own.get('validations', {}).items():
            cls.validates(attribute, **kinds)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        """
        Initialize model.

        Initial attributes are stored clean: nothing is touched and no change
        events are emitted.

        Args:
            attributes: Initial attribute values
            **kwargs: More initial attribute values
        """
        self.attributes: Dict[str, Any] = {}
        self.errors: Dict[str, List[str]] = {}
        self.touched: Dict[str, bool] = {}
        self._pending_validations = 0
        self._validation_task: Optional[asyncio.Task] = None

        initial = dict(attributes or {})
        initial.update(kwargs)
        self.set(initial, clean=True)

        self.emit("initialized", self)

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    @classmethod
    def add_validation(cls, validator: BaseValidator) -> BaseValidator:
        """Declare a validator instance on this class."""
        cls.registry.add_validation(cls, validator)
        return validator

    @classmethod
    def validates(cls, attribute: str, if_: Any = None, **kinds: Any) -> List[BaseValidator]:
        """
        Declare validators for an attribute by kind name.

        Each keyword names a registered validator kind. Its value is an
        options mapping, ``True`` for default options, or any other value as
        shorthand for ``{"with": value}``. ``False``/``None`` skip the kind.

        Args:
            attribute: Attribute to validate
            if_: Condition shared by every declared kind (callable or method name)
            **kinds: kind name -> options

        Returns:
            The created validators

        Raises:
            UnknownValidatorError: If a kind is not registered
        """
        if 'if' in kinds:
            if_ = kinds.pop('if')

        created = []
        for kind, options in kinds.items():
            if options is False or options is None:
                continue

            if options is True:
                options = {}
            elif isinstance(options, Mapping):
                options = dict(options)
            else:
                options = {'with': options}

            if if_ is not None:
                options.setdefault('if', if_)

            created.append(cls.add_validation(build_validator(kind, attribute, options)))

        return created

    @classmethod
    def attr_accessible(cls, *names: str) -> None:
        """Declare attributes that ``assign_attributes`` may set."""
        for name in names:
            cls.registry.declare_accessible(cls, name)

    @classmethod
    def validators(cls) -> List[BaseValidator]:
        """Effective validators, ancestors' first."""
        return cls.registry.validators_for(cls)

    @classmethod
    def accessible_attributes(cls) -> List[str]:
        return cls.registry.accessible_for(cls)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, silent: bool = False):
        """
        Run every validator and return an awaitable completion.

        Synchronous validators have already run when this returns. Without
        asynchronous validators the result events are emitted right away and
        the completion is already resolved. Otherwise the completion waits for
        the asynchronous ones and then emits the result events; inside a
        running loop it is scheduled as a task, so it finishes whether or not
        the caller awaits it. The completion resolves to the model itself.

        Concurrent passes on one instance are not serialized; a later pass
        resets ``errors`` while an earlier one may still be writing to it.

        Args:
            silent: Suppress validate/valid/invalid/invalid:{attr} events

        Returns:
            Awaitable resolving to self; a coroutine only when asynchronous
            validators are pending and no event loop is running
        """
        self.errors = {}

        if not silent:
            self.emit("validate", self)

        if self._pending_validations:
            logger.debug(
                f"{type(self).__name__}: validation started while "
                f"{self._pending_validations} pass(es) still pending"
            )

        engine = ValidationEngine(self.registry)
        invocations = engine.start(self)

        if not engine.has_pending(invocations):
            self._finish(silent)
            return Settled(self)

        completion = self._complete(engine, invocations, silent)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return completion

        self._validation_task = loop.create_task(completion)
        return self._validation_task

    async def _complete(
        self,
        engine: ValidationEngine,
        invocations: List[Invocation],
        silent: bool
    ) -> 'Model':
        self._pending_validations += 1
        try:
            await engine.settle(self, invocations)
        finally:
            self._pending_validations -= 1

        self._finish(silent)
        return self

    def _finish(self, silent: bool) -> None:
        if not silent:
            for attribute, messages in list(self.errors.items()):
                self.emit(f"invalid:{attribute}", self, messages)
            if self.errors:
                self.emit("invalid", self, self.errors)
            else:
                self.emit("valid", self)

        logger.debug(
            f"{type(self).__name__} validated: "
            f"{'valid' if not self.errors else sorted(self.errors)}"
        )

    def is_valid(self, silent: bool = False) -> bool:
        """
        Validate and report whether there are no errors.

        Outside an event loop the whole pass, asynchronous validators
        included, runs before returning. Inside a running loop pending
        asynchronous validators are left to a task and the answer only
        reflects synchronous validators; await ``validate()`` instead when
        any validator is asynchronous.
        """
        completion = self.validate(silent=silent)

        if asyncio.iscoroutine(completion):
            asyncio.run(completion)

        return not self.errors

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def add_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, []).append(message)

    def add_error_to_base(self, message: str) -> None:
        """Record an error about the object as a whole."""
        self.add_error(BASE, message)

    def errors_on(self, name: str) -> List[str]:
        return list(self.errors.get(name, []))

    def full_messages(self) -> List[str]:
        """
        Errors as sentences, e.g. "Name can't be empty".

        Base errors are returned unchanged.
        """
        messages = []
        for name, errors in self.errors.items():
            for message in errors:
                if name == BASE:
                    messages.append(message)
                else:
                    messages.append(translate(
                        'errors.format.attribute_message',
                        attribute=humanize(name),
                        message=message
                    ))
        return messages

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def _attribute_set(self, name: str, value: Any) -> None:
        super()._attribute_set(name, value)
        self.touch(name)

    def assign_attributes(self, attributes: Mapping[str, Any]) -> 'Model':
        """
        Set attributes from external input, limited to accessible names.

        Classes that declare no accessible attributes accept every name.
        """
        allowed = self.accessible_attributes()
        permitted = {}

        for name, value in attributes.items():
            if allowed and name not in allowed:
                logger.debug(f"{type(self).__name__}: skipping inaccessible attribute '{name}'")
                continue
            permitted[name] = value

        self.set(permitted)
        return self

    def is_blank(self, *names: str) -> bool:
        """True if every named attribute (default: all) is None or ''."""
        selected = names or tuple(self.attributes)
        return all(self.get(name) is None or self.get(name) == "" for name in selected)

    def touch(self, name: str) -> None:
        self.touched[name] = True
        self.emit(f"touched:{name}", self)

    def untouch(self, name: str) -> None:
        self.touched[name] = False
        self.emit(f"untouched:{name}", self)

    def is_touched(self, name: str) -> bool:
        return self.touched.get(name, False)

    def reset(self, name: str) -> None:
        """Untouch an attribute and clear its value."""
        self.untouch(name)
        self.set(name, None, clean=True)

    def to_json(self) -> Dict[str, Any]:
        """Plain snapshot of every attribute, nested models included."""
        return {name: to_plain(value) for name, value in self.attributes.items()}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.attributes!r}>"


MODEL_REGISTRY.register(Model)
