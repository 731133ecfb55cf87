"""Suspendable computations driven by the generator fixture."""

import inspect
from collections.abc import Generator
from typing import Any, NamedTuple, Protocol, runtime_checkable


class StepResult(NamedTuple):
    """Outcome of a single resume: the produced value and completion flag."""

    value: Any
    done: bool


@runtime_checkable
class SuspendableComputation(Protocol):
    """Anything that can be resumed with a value or with an exception."""

    def resume(self, value: Any = None) -> StepResult:
        """Continue the computation, delivering ``value`` to the pending suspension point."""
        ...

    def throw(self, exception: Any) -> StepResult:
        """Continue the computation by raising ``exception`` at the pending suspension point."""
        ...


class GeneratorComputation:
    """
    Adapts a Python generator to ``SuspendableComputation``.

    ``StopIteration`` is translated into a completed ``StepResult`` carrying
    the generator's return value. A generator that has already finished
    keeps reporting ``(None, True)`` on ``resume``; ``throw`` into a finished
    generator re-raises the thrown exception, as the generator protocol does.
    """

    def __init__(self, generator: Generator):
        self._generator = generator

    @property
    def generator(self) -> Generator:
        return self._generator

    def resume(self, value: Any = None) -> StepResult:
        try:
            return StepResult(self._generator.send(value), False)
        except StopIteration as stop:
            return StepResult(stop.value, True)

    def throw(self, exception: Any) -> StepResult:
        try:
            return StepResult(self._generator.throw(exception), False)
        except StopIteration as stop:
            return StepResult(stop.value, True)

    def close(self) -> None:
        self._generator.close()


def is_computation(source: Any) -> bool:
    """Return True if ``source`` already implements the computation protocol."""
    return (
        not inspect.isgenerator(source)
        and not isinstance(source, type)
        and isinstance(source, SuspendableComputation)
    )


def as_computation(source: Any, *args: Any, **kwargs: Any) -> SuspendableComputation:
    """
    Normalize a configured source into a ``SuspendableComputation``.

    Args:
        source: A computation, a generator object, or a callable returning a generator
        *args: Positional arguments for ``source`` when it is callable
        **kwargs: Keyword arguments for ``source`` when it is callable

    Returns:
        A computation ready for its first resume

    Raises:
        TypeError: If ``source`` (or what it returns) is not resumable
    """
    if is_computation(source):
        return source
    if inspect.isgenerator(source):
        return GeneratorComputation(source)
    if callable(source):
        produced = source(*args, **kwargs)
        if inspect.isgenerator(produced):
            return GeneratorComputation(produced)
        if is_computation(produced):
            return produced
        raise TypeError(
            f"{getattr(source, '__name__', source)!r} returned "
            f"{type(produced).__name__}, expected a generator"
        )
    raise TypeError(
        f"Cannot drive object of type {type(source).__name__}; "
        "expected a generator, a generator function or a SuspendableComputation"
    )
