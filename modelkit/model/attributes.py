"""
Attribute storage and access for models.
"""

from typing import Any, Dict, Mapping, Union


class AttributeAccessor:
    """
    Mixin that stores named attributes in ``self.attributes``.

    ``set`` accepts either a single name/value pair or a mapping. A ``clean``
    set stores values silently; otherwise every changed attribute emits
    ``change:{name}`` followed by one ``change`` event.

    Requires ``emit`` from EventEmitter.
    """

    attributes: Dict[str, Any]

    def get(self, name: str, default: Any = None) -> Any:
        """Return the attribute value, or ``default`` when it is not set."""
        return self.attributes.get(name, default)

    def has(self, name: str) -> bool:
        """True if the attribute is set to something other than None."""
        return self.attributes.get(name) is not None

    def set(
        self,
        name: Union[str, Mapping[str, Any]],
        value: Any = None,
        clean: bool = False
    ) -> 'AttributeAccessor':
        """
        Set one attribute or a mapping of attributes.

        Args:
            name: Attribute name, or a mapping of names to values
            value: Value when ``name`` is a string
            clean: Store without touching or emitting change events

        Returns:
            self
        """
        if isinstance(name, Mapping):
            changes = dict(name)
        else:
            changes = {name: value}

        for key, new_value in changes.items():
            self.attributes[key] = new_value
            if not clean:
                self._attribute_set(key, new_value)

        if changes and not clean:
            self.emit("change", self)

        return self

    def unset(self, name: str, clean: bool = False) -> 'AttributeAccessor':
        """Remove an attribute entirely."""
        if name in self.attributes:
            del self.attributes[name]
            if not clean:
                self._attribute_set(name, None)
                self.emit("change", self)
        return self

    def _attribute_set(self, name: str, value: Any) -> None:
        self.emit(f"change:{name}", self, value)

    def __contains__(self, name: object) -> bool:
        return name in self.attributes

    def __getitem__(self, name: str) -> Any:
        return self.attributes[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

