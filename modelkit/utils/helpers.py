"""
Helper utility functions.
"""

from typing import Any


def humanize(name: str) -> str:
    """
    Turn an attribute name into a readable label.

    Example:
        humanize("password_confirmation")  # Returns "Password confirmation"
    """
    if not name:
        return ""
    return name.replace("_", " ").strip().capitalize()


def to_plain(value: Any) -> Any:
    """
    Convert a value for a JSON-style snapshot.

    Values exposing ``to_json()`` are replaced by their own snapshot; lists
    and tuples are converted element-wise. Everything else is returned as-is.
    """
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value
