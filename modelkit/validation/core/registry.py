"""
Validator registry system.

Two registries live here:
- VALIDATOR_REGISTRY maps a rule name ("presence", "range", ...) to its
  validator class. Validators self-register with @register_validator.
- ValidationRegistry holds, per model class, the validator instances and
  accessible attribute names declared on that class. Effective lists are
  composed through the class hierarchy, so a declaration is visible to the
  declaring class and its subclasses only.
"""

import weakref
from typing import Any, Dict, List, Mapping, Optional, Type

from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.exceptions import UnknownValidatorError
from modelkit.utils.logger import setup_logger

logger = setup_logger(__name__)

# Global registry of all validator kinds
VALIDATOR_REGISTRY: Dict[str, Type[BaseValidator]] = {}


def register_validator(name: str):
    """
    Decorator to register a validator kind in the global registry.

    Usage:
        @register_validator("presence")
        class PresenceValidator(BaseValidator):
            def run(self, subject):
                ...

    Args:
        name: Unique name for the validator (used in declarations)

    Returns:
        Decorator function
    """
    def decorator(cls: Type[BaseValidator]):
        if name in VALIDATOR_REGISTRY:
            logger.warning(
                f"Validator '{name}' is already registered. "
                f"Overwriting with {cls.__name__}"
            )

        cls.kind = name
        VALIDATOR_REGISTRY[name] = cls
        logger.debug(f"Registered validator: {name} -> {cls.__name__}")
        return cls

    return decorator


def get_validator(name: str) -> Optional[Type[BaseValidator]]:
    """
    Get validator class by name from registry.

    Args:
        name: Validator name

    Returns:
        Validator class or None if not found
    """
    return VALIDATOR_REGISTRY.get(name)


def list_validators() -> Dict[str, str]:
    """
    List all registered validators.

    Returns:
        Dictionary mapping validator names to class names
    """
    return {
        name: cls.__name__
        for name, cls in VALIDATOR_REGISTRY.items()
    }


def is_registered(name: str) -> bool:
    """Check if a validator is registered."""
    return name in VALIDATOR_REGISTRY


def build_validator(
    name: str,
    attribute: str,
    options: Optional[Mapping[str, Any]] = None
) -> BaseValidator:
    """
    Instantiate a registered validator kind.

    Args:
        name: Validator name
        attribute: Attribute the validator checks
        options: Validator options

    Returns:
        Validator instance

    Raises:
        UnknownValidatorError: If the name is not registered
    """
    validator_class = get_validator(name)

    if validator_class is None:
        available = sorted(VALIDATOR_REGISTRY.keys())
        raise UnknownValidatorError(
            f"Validator '{name}' not registered. Available: {available}"
        )

    return validator_class(attribute, options)


class ValidationRegistry:
    """
    Per-class validator and accessible-attribute declarations.

    Each registered class owns its own lists; nothing is shared between
    classes. ``validators_for`` walks the method resolution order from the
    most distant ancestor down to the class itself and concatenates the
    lists, so parents' validators come first.

    Because the walk is the reversed MRO, a class with several bases gets
    the right-hand base's validators before the left-hand base's. For
    ``class D(B, C)`` with ``B(A)`` and ``C(A)`` the order is A, C, B, D.

    Classes are held weakly; a class that is no longer referenced elsewhere
    drops out of the registry together with its declarations.
    """

    def __init__(self):
        self._validators: 'weakref.WeakKeyDictionary[type, List[BaseValidator]]' = \
            weakref.WeakKeyDictionary()
        self._accessible: 'weakref.WeakKeyDictionary[type, List[str]]' = \
            weakref.WeakKeyDictionary()

    def register(self, model_cls: type) -> None:
        """Create empty entries for a class (idempotent)."""
        if model_cls not in self._validators:
            self._validators[model_cls] = []
            self._accessible[model_cls] = []
            logger.debug(f"Registered model class: {model_cls.__name__}")

    def is_registered(self, model_cls: type) -> bool:
        return model_cls in self._validators

    def _lineage(self, model_cls: type) -> List[type]:
        return [
            klass for klass in reversed(model_cls.__mro__)
            if klass in self._validators
        ]

    def add_validation(self, model_cls: type, validator: BaseValidator) -> None:
        """Append a validator to the class's own declarations."""
        self.register(model_cls)
        self._validators[model_cls].append(validator)
        logger.debug(f"{model_cls.__name__}: added {validator!r}")

    def declare_accessible(self, model_cls: type, name: str) -> None:
        """Declare an externally settable attribute; duplicates are ignored."""
        self.register(model_cls)
        if name in self.accessible_for(model_cls):
            return
        self._accessible[model_cls].append(name)

    def own_validators(self, model_cls: type) -> List[BaseValidator]:
        """Validators declared directly on the class."""
        return list(self._validators.get(model_cls, []))

    def validators_for(self, model_cls: type) -> List[BaseValidator]:
        """Effective ordered validators for a class, ancestors first."""
        return [
            validator
            for klass in self._lineage(model_cls)
            for validator in self._validators[klass]
        ]

    def accessible_for(self, model_cls: type) -> List[str]:
        """Effective accessible attribute names, ancestors first."""
        names: List[str] = []
        for klass in self._lineage(model_cls):
            for name in self._accessible[klass]:
                if name not in names:
                    names.append(name)
        return names


# Default registry used by Model
MODEL_REGISTRY = ValidationRegistry()
