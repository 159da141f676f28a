"""
Model module.

- Model: attribute container with declarative validation
- AttributeAccessor: get/set storage mixin
- EventEmitter: subscribe/emit observer mixin
"""

from modelkit.model.base import Model, BASE
from modelkit.model.attributes import AttributeAccessor
from modelkit.model.events import EventEmitter

__all__ = ['Model', 'BASE', 'AttributeAccessor', 'EventEmitter']
