"""
GeneratorFixture: step a generator through its ``yield`` points from a test.

The fixture owns one suspendable computation, starts it, and resumes it
under test control, sending values or throwing exceptions at each
suspension point. Suspension points are numbered from 1: ``start`` lands
on point 1, and every further resume moves one point ahead.

Example:
    ```python
    def checkout(cart):
        user = yield "fetch_user"
        order = yield ("create_order", user, cart)
        yield ("notify", order)

    fixture = (
        GeneratorFixture(checkout)
        .configure_flow([
            {"name": "user", "defaultValue": {"id": 7}},
            {"name": "order", "defaultValue": "order-1"},
        ])
        .start(["book"])
    )
    fixture.advance_to("order")
    assert fixture.value == ("notify", "order-1")
    ```
"""

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from gentest.common.exceptions import (
    InvalidStateError,
    NotConfiguredError,
    NotStartedError,
)
from gentest.computation import GeneratorComputation, SuspendableComputation, as_computation
from gentest.config import FixtureConfig, RestartPolicy
from gentest.flow import Flow, FlowStep, Resume

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for arguments that were not supplied."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


class FixtureState(StrEnum):
    """Lifecycle states of a GeneratorFixture."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    STARTED = "started"
    DONE = "done"


class GeneratorFixture:
    """
    Drives one generator through its suspension points.

    The computation and flow can only be changed before ``start``. After
    every resume, ``value`` and ``done`` hold the outcome of the most recent
    successful resume and ``position`` counts the resumes issued so far.
    A resume that raises still counts: ``position`` moves, ``value`` and
    ``done`` do not.

    Stepping past the end of the generator is not an error; the generator
    protocol decides what happens (``advance_one`` keeps reporting
    ``done``, a thrown exception propagates).
    """

    def __init__(
        self,
        computation: Any = None,
        flow: Flow | Iterable[Mapping[str, Any] | FlowStep] | None = None,
        config: FixtureConfig | None = None,
    ):
        """
        Initialize the fixture.

        Args:
            computation: Generator function, generator object or SuspendableComputation
            flow: Optional flow index, as a Flow or a list of step records
            config: Fixture configuration (defaults to FixtureConfig())
        """
        self._config = config or FixtureConfig()
        self._source: Any = None
        self._flow = Flow()
        self._computation: SuspendableComputation | None = None
        self._started = False
        self._position = 0
        self._value: Any = None
        self._done = False

        if computation is not None:
            self.configure(computation)
        if flow is not None:
            self.configure_flow(flow)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def config(self) -> FixtureConfig:
        return self._config

    @property
    def computation(self) -> Any:
        """The configured generator source."""
        return self._source

    @property
    def flow(self) -> Flow:
        return self._flow

    @property
    def started(self) -> bool:
        return self._started

    @property
    def position(self) -> int:
        """Number of resumes issued since ``start`` (0 before start)."""
        return self._position

    @property
    def value(self) -> Any:
        """Value produced by the last successful resume."""
        return self._value

    @property
    def done(self) -> bool:
        """Whether the last successful resume completed the computation."""
        return self._done

    @property
    def state(self) -> FixtureState:
        if not self._started:
            if self._source is None:
                return FixtureState.UNCONFIGURED
            return FixtureState.CONFIGURED
        return FixtureState.DONE if self._done else FixtureState.STARTED

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure(self, computation: Any) -> "GeneratorFixture":
        """
        Set the computation to drive, replacing any previous one.

        Raises:
            InvalidStateError: If the fixture has already started
        """
        self._ensure_not_started("configure")
        self._source = computation
        return self

    def configure_flow(
        self, steps: Flow | Iterable[Mapping[str, Any] | FlowStep] | None
    ) -> "GeneratorFixture":
        """
        Set the flow index, replacing any previous one.

        Raises:
            InvalidStateError: If the fixture has already started
            FlowDefinitionError: If a step record is invalid
        """
        self._ensure_not_started("configure_flow")
        self._flow = steps if isinstance(steps, Flow) else Flow.from_records(steps)
        return self

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def start(self, *args: Any, **kwargs: Any) -> "GeneratorFixture":
        """
        Create the computation and advance it to its first suspension point.

        Arguments are passed to the generator function. Calling ``start``
        again follows ``config.restart_policy``.

        Raises:
            NotConfiguredError: If no computation was configured
            InvalidStateError: On restart with RestartPolicy.RAISE
        """
        if self._source is None:
            raise NotConfiguredError(
                "Cannot start without a computation. Provide one via the "
                "constructor or the configure method",
                operation="start",
            )
        if self._started and self._config.restart_policy is RestartPolicy.RAISE:
            raise InvalidStateError(
                "Fixture has already started; create a new fixture to run again",
                operation="start",
                context={"position": self._position},
            )

        computation = as_computation(self._source, *args, **kwargs)
        if self._started:
            logger.debug("Restarting fixture at position %d", self._position)
            self._release(computation)

        self._computation = computation
        self._started = True
        self._position = 0
        self._value = None
        self._done = False
        self._resume(Resume.NOTHING)
        return self

    def advance_one(self, value: Any = MISSING, throw: bool = False) -> "GeneratorFixture":
        """
        Resume the computation exactly once, ignoring flow defaults.

        Args:
            value: Value sent to the pending ``yield`` (or thrown, with ``throw``)
            throw: Raise ``value`` at the pending ``yield`` instead of sending it

        Raises:
            NotStartedError: If ``start`` was never called
            ValueError: If ``throw`` is set without a value
        """
        self._ensure_started("advance_one")
        override = self._override(value, throw)
        self._resume(Resume.NOTHING if override is None else override)
        return self

    def advance_to(
        self, target: int | str, value: Any = MISSING, throw: bool = False
    ) -> "GeneratorFixture":
        """
        Forward the computation to a suspension point.

        Every step forwarded over is resumed with its flow defaults. The
        final resume, the one landing on ``target``, uses ``value``/``throw``
        when given and the flow defaults otherwise. Targets at or before
        the current position are ignored.

        Args:
            target: 1-based suspension point, or the name of a flow step
            value: Value for the final resume; overrides the flow defaults
            throw: Raise ``value`` at the final resume instead of sending it

        Raises:
            NotStartedError: If ``start`` was never called
            NotFoundError: If ``target`` names no flow step
            TypeError: If ``target`` is neither an int nor a str
            ValueError: If ``throw`` is set without a value
        """
        self._ensure_started("advance_to")
        target_position = self._resolve_target(target)
        override = self._override(value, throw)

        if target_position <= self._position:
            logger.debug(
                "Ignoring target %r: already at position %d", target, self._position
            )
            return self

        while self._position < target_position - 1:
            self._resume(self._flow.defaults_for(self._position))

        if override is None:
            override = self._flow.defaults_for(self._position)
        self._resume(override)
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _release(self, replacement: SuspendableComputation) -> None:
        # A generator object passed in directly is continued, not closed.
        previous = self._computation
        if not isinstance(previous, GeneratorComputation):
            return
        if (
            isinstance(replacement, GeneratorComputation)
            and replacement.generator is previous.generator
        ):
            return
        previous.close()

    def _resume(self, instruction: Resume) -> None:
        self._position += 1
        if self._config.log_resumes:
            logger.debug(
                "Resume #%d: %s %r",
                self._position,
                "throw" if instruction.throw else "send",
                instruction.value,
            )

        if instruction.throw:
            result = self._computation.throw(instruction.value)
        else:
            result = self._computation.resume(instruction.value)
        self._value, self._done = result

    def _resolve_target(self, target: int | str) -> int:
        if isinstance(target, bool) or not isinstance(target, (int, str)):
            raise TypeError(
                f"Target must be a step index or a step name, got {type(target).__name__}"
            )
        if isinstance(target, str):
            return self._flow.resolve(target)
        return target

    @staticmethod
    def _override(value: Any, throw: bool) -> Resume | None:
        if value is MISSING:
            if throw:
                raise ValueError("throw=True requires an exception value")
            return None
        return Resume(value=value, throw=throw)

    def _ensure_not_started(self, operation: str) -> None:
        if self._started:
            raise InvalidStateError(
                f"Cannot {operation.replace('_', ' ')} once the fixture has started",
                operation=operation,
            )

    def _ensure_started(self, operation: str) -> None:
        if not self._started:
            raise NotStartedError(
                "Cannot move forward before the fixture has started. "
                "Call start() before stepping",
                operation=operation,
            )

    def __repr__(self) -> str:
        return (
            f"GeneratorFixture(state={self.state.value!r}, position={self._position}, "
            f"value={self._value!r}, done={self._done})"
        )
