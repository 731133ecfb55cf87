"""
Flow index for the generator fixture.

A flow is an ordered list of named steps describing the suspension points
of a generator. Naming a step lets a test forward the generator to the
point reached *after* that step has been resumed, and the step's defaults
supply what is sent (or thrown) while forwarding over it.

Example:
    ```python
    flow = Flow.from_records([
        {"name": "fetch_user", "defaultValue": {"id": 1}},
        {"name": "save", "throws": "ConnectionError"},
    ])
    flow.resolve("save")  # -> 3
    ```
"""

import builtins
import importlib
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from gentest.common.exceptions import FlowDefinitionError, NotFoundError


def resolve_exception_type(type_name: str) -> type[BaseException]:
    """
    Resolve an exception class from its name.

    Builtin names (``KeyError``) are looked up directly; anything else is
    treated as a dotted import path (``json.JSONDecodeError``).

    Raises:
        ValueError: If the name does not resolve to an exception class
    """
    exc_type: Any = getattr(builtins, type_name, None)
    if exc_type is None and "." in type_name:
        module_name, _, attr = type_name.rpartition(".")
        try:
            exc_type = getattr(importlib.import_module(module_name), attr, None)
        except ImportError:
            exc_type = None

    if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
        raise ValueError(f"'{type_name}' is not an exception type")
    return exc_type


def exception_type_name(exc_type: type[BaseException]) -> str:
    """Inverse of ``resolve_exception_type``."""
    if exc_type.__module__ == "builtins":
        return exc_type.__qualname__
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


class FlowStep(BaseModel):
    """A named suspension point with optional defaults."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    name: str = Field(
        min_length=1,
        description="Step name used as a symbolic forwarding target"
    )
    default_value: Any = Field(
        default=None,
        validation_alias=AliasChoices("default_value", "defaultValue"),
        description="Value sent to the generator when forwarding over this step"
    )
    default_exception: BaseException | type[BaseException] | None = Field(
        default=None,
        validation_alias=AliasChoices("default_exception", "defaultException", "throws"),
        description="Exception thrown into the generator; wins over default_value"
    )

    @field_validator("default_exception", mode="before")
    @classmethod
    def parse_exception(cls, v):
        """Accept exception names and ``{type, message}`` or ``{type, args}`` mappings."""
        if isinstance(v, str):
            return resolve_exception_type(v)
        if isinstance(v, Mapping):
            if "type" not in v:
                raise ValueError("exception mapping requires a 'type' key")
            exc_type = resolve_exception_type(str(v["type"]))
            if "args" in v:
                args = v["args"]
                if not isinstance(args, (list, tuple)):
                    raise ValueError("exception 'args' must be a list")
                return exc_type(*args)
            message = v.get("message")
            return exc_type(message) if message is not None else exc_type
        return v

    def resume_instruction(self) -> "Resume":
        """Build the resume used when this step is forwarded over."""
        if self.default_exception is not None:
            return Resume.fault(self.default_exception)
        if self.default_value is not None:
            return Resume.send(self.default_value)
        return Resume.NOTHING

    def to_record(self) -> dict[str, Any]:
        """Plain-data form of this step, suitable for YAML/JSON output."""
        record: dict[str, Any] = {"name": self.name}
        if self.default_value is not None:
            record["default_value"] = self.default_value
        exc = self.default_exception
        if isinstance(exc, type):
            record["default_exception"] = {"type": exception_type_name(exc)}
        elif exc is not None:
            entry: dict[str, Any] = {"type": exception_type_name(type(exc))}
            if len(exc.args) == 1 and exc.args[0] is not None:
                entry["message"] = exc.args[0]
            else:
                entry["args"] = list(exc.args)
            record["default_exception"] = entry
        return record


@dataclass(frozen=True)
class Resume:
    """
    Instruction for one resume of a suspendable computation.

    ``throw=False`` delivers ``value`` as the result of the pending
    suspension point; ``throw=True`` raises ``value`` there instead.
    """

    NOTHING: ClassVar["Resume"]

    value: Any = None
    throw: bool = False

    @classmethod
    def send(cls, value: Any) -> "Resume":
        return cls(value=value, throw=False)

    @classmethod
    def fault(cls, exception: Any) -> "Resume":
        return cls(value=exception, throw=True)


Resume.NOTHING = Resume()


class Flow:
    """
    Ordered, immutable sequence of ``FlowStep``.

    Step ``flow[i]`` describes the resume issued while the fixture sits at
    suspension point ``i + 1``; naming it targets suspension point ``i + 2``.
    """

    def __init__(self, steps: Iterable[FlowStep] = (), name: str | None = None):
        self._steps: tuple[FlowStep, ...] = tuple(steps)
        self.name = name

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any] | FlowStep] | None,
        name: str | None = None,
    ) -> "Flow":
        """
        Build a flow from plain step records.

        Args:
            records: Step mappings (``name``, ``defaultValue``, ``defaultException``)
                or ready-made ``FlowStep`` instances
            name: Optional flow name

        Raises:
            FlowDefinitionError: If any record fails validation
        """
        if records is None:
            return cls(name=name)
        if isinstance(records, (str, bytes, Mapping)):
            raise FlowDefinitionError(
                f"Flow steps must be a sequence of records, got {type(records).__name__}"
            )

        steps = []
        for index, record in enumerate(records):
            if isinstance(record, FlowStep):
                steps.append(record)
                continue
            try:
                steps.append(FlowStep.model_validate(record))
            except ValidationError as e:
                raise FlowDefinitionError(
                    f"Invalid flow step at index {index}: {e.error_count()} error(s)",
                    errors=e.errors(include_url=False),
                    context={"index": index},
                ) from e
        return cls(steps, name=name)

    @property
    def names(self) -> list[str]:
        return [step.name for step in self._steps]

    def resolve(self, name: str) -> int:
        """
        Translate a step name into the ordinal of the suspension point it targets.

        Args:
            name: Step name; the first matching step wins

        Returns:
            1-based suspension point reached after resuming the named step

        Raises:
            NotFoundError: If no step has this name
        """
        for index, step in enumerate(self._steps):
            if step.name == name:
                return index + 2
        raise NotFoundError(
            f"No step named '{name}' in flow",
            step_name=name,
            context={"available": self.names},
        )

    def step_at(self, position: int) -> FlowStep | None:
        """Step whose resume leaves suspension point ``position``."""
        index = position - 1
        if 0 <= index < len(self._steps):
            return self._steps[index]
        return None

    def defaults_for(self, position: int) -> Resume:
        """Default resume for leaving suspension point ``position``."""
        step = self.step_at(position)
        if step is None:
            return Resume.NOTHING
        return step.resume_instruction()

    def to_records(self) -> list[dict[str, Any]]:
        return [step.to_record() for step in self._steps]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[FlowStep]:
        return iter(self._steps)

    def __getitem__(self, index: int) -> FlowStep:
        return self._steps[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._steps == other._steps

    def __repr__(self) -> str:
        return f"Flow(name={self.name!r}, steps={self.names!r})"
