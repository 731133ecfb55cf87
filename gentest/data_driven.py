"""Helpers for data-driven tests: iteration and readable test descriptions."""

import inspect
import json
from collections.abc import Callable, Sequence
from typing import Any

MAX_JSON_LENGTH = 25
PLACEHOLDER = "{}"


def for_all(values: Sequence[Any] | None, invoke: Callable[[Any], Any] | None) -> None:
    """
    Call ``invoke`` once per element of ``values``.

    Does nothing when ``values`` is not a list or tuple, or when ``invoke``
    is not callable.
    """
    if isinstance(values, (list, tuple)) and callable(invoke):
        for value in values:
            invoke(value)


def _custom_text(value: Any, base: type) -> str | None:
    """Text from a ``__str__``/``__repr__`` override, if the type defines one."""
    cls = type(value)
    for method in ("__str__", "__repr__"):
        if getattr(cls, method) is getattr(base, method):
            continue
        text = getattr(cls, method)(value)
        if isinstance(text, str):
            return text or None
    return None


def _collection_text(value: Any, base: type, closing: str) -> str:
    custom = _custom_text(value, base)
    if custom:
        return custom
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    if len(text) > MAX_JSON_LENGTH:
        return f"{text[:MAX_JSON_LENGTH]}...{closing}"
    return text


def pretty(value: Any) -> str:
    """
    Render a value for a test description.

    Strings are quoted, functions show their name, and lists, tuples and
    dicts are shown as compact JSON capped at 25 characters.
    """
    if value is None or isinstance(value, (bool, int, float)):
        return str(value)
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, list):
        return _collection_text(value, list, "]")
    if isinstance(value, tuple):
        return _collection_text(value, tuple, "]")
    if isinstance(value, dict):
        return _collection_text(value, dict, "}")
    if inspect.isroutine(value):
        name = getattr(value, "__name__", "")
        if not name or name == "<lambda>":
            return "function()"
        return f"function {name}()"
    return str(value)


def p(template: str, *values: Any) -> str:
    """
    Format a test description, pretty-printing each value.

    Each ``{}`` in ``template`` is replaced by the next value rendered with
    ``pretty``. Placeholders without a value are dropped.

    Example:
        >>> p("{} plus {} is {}", "one", 1, [2])
        "'one' plus 1 is [2]"
    """
    parts = template.split(PLACEHOLDER)
    rendered = [parts[0]]
    for index, part in enumerate(parts[1:]):
        if index < len(values):
            rendered.append(pretty(values[index]))
        rendered.append(part)
    return "".join(rendered)
