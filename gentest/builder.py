"""
Test data builders.

``Builder`` keeps a fixed set of properties decided at construction time and
builds plain dictionaries from them. Property names may carry a leading
underscore (``_email``); the marker is stripped once, when the builder is
created, so ``with_values({"email": ...})`` and ``build()["email"]`` both use
the bare name.

Example:
    ```python
    class UserBuilder(Builder):
        def __init__(self):
            super().__init__(name="Ada", _email="ada@example.com")

    UserBuilder().with_values({"email": "x@y.z"}).build()
    # {'name': 'Ada', 'email': 'x@y.z'}
    ```
"""

from collections.abc import Callable, Mapping
from typing import Any


def field_name(name: str) -> str:
    """External name of a builder property (leading underscore removed)."""
    return name[1:] if name.startswith("_") else name


class Builder:
    """Base class for test data builders."""

    def __init__(self, **properties: Any):
        self._fields: dict[str, Any] = {}
        self._known: tuple[str, ...] = ()
        self._define(properties)

    def _define(self, properties: Mapping[str, Any]) -> None:
        for name, value in properties.items():
            self._fields[field_name(name)] = value
        self._known = tuple(self._fields)

    def with_values(self, properties: Mapping[str, Any]) -> "Builder":
        """
        Merge matching properties into the builder.

        Names unknown to the builder are ignored. Both ``email`` and
        ``_email`` address the property declared as ``_email``.

        Returns:
            The builder, for chaining
        """
        for name, value in properties.items():
            key = field_name(name)
            if key in self._known:
                self._fields[key] = value
        return self

    def without(self, name: str) -> "Builder":
        """Drop a property from the built record."""
        self._fields.pop(field_name(name), None)
        return self

    def build(self) -> dict[str, Any]:
        """Create a new dictionary from the builder's current properties."""
        return {name: self._fields[name] for name in self._known if name in self._fields}


class AutoBuilder(Builder):
    """
    Builder with generated ``with_<name>`` and ``without_<name>`` methods.

    For ``AutoBuilder({"_prop": 1, "other": 2})`` the methods
    ``with_prop(value)``, ``without_prop()``, ``with_other(value)`` and
    ``without_other()`` are available.
    """

    def __init__(self, initial_properties: Mapping[str, Any]):
        if not isinstance(initial_properties, Mapping) or not initial_properties:
            raise TypeError(
                "AutoBuilder requires at least one initial property. "
                "Use Builder if no initial properties can be given"
            )
        super().__init__(**initial_properties)
        reserved = [
            name
            for name in self._known
            if hasattr(type(self), f"with_{name}") or hasattr(type(self), f"without_{name}")
        ]
        if reserved:
            raise TypeError(
                f"Property name(s) {', '.join(map(repr, reserved))} clash with "
                f"{type(self).__name__} methods"
            )

    def __getattr__(self, attribute: str) -> Callable[..., "AutoBuilder"]:
        known = self.__dict__.get("_known", ())
        prefix, _, name = attribute.partition("_")
        if name in known:
            if prefix == "with":
                return lambda value: self.with_values({name: value})
            if prefix == "without":
                return lambda: self.without(name)
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {attribute!r}"
        )
