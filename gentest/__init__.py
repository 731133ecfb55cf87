"""
gentest: utilities for writing tests.

The centerpiece is GeneratorFixture, which steps a generator through its
``yield`` points under test control, sending values or throwing exceptions
at each one. Suspension points can be addressed by number or by the name
of a step in a flow.

Core Components:
    - GeneratorFixture: Drives a generator from a test
    - Flow / FlowStep: Named suspension points with default resume values
    - Builder / AutoBuilder: Test data builders
    - for_all / p: Data-driven test helpers
    - record_error / record_error_async: Capture exceptions for assertions

Example Usage:
    ```python
    from gentest import GeneratorFixture

    def greet():
        name = yield "who?"
        yield f"hello {name}"

    fixture = GeneratorFixture(greet).start()
    fixture.advance_one("ada")
    assert fixture.value == "hello ada"
    ```
"""

__version__ = "0.1.0"

from .builder import AutoBuilder, Builder
from .common.exceptions import (
    ConfigurationError,
    FixtureStateError,
    FlowDefinitionError,
    FlowLoadError,
    GenTestError,
    InvalidStateError,
    NotConfiguredError,
    NotFoundError,
    NotStartedError,
)
from .computation import GeneratorComputation, StepResult, SuspendableComputation
from .config import FixtureConfig, RestartPolicy
from .data_driven import for_all, p, pretty
from .fixture import FixtureState, GeneratorFixture
from .flow import Flow, FlowStep, Resume
from .loader import dump_flow, load_flow
from .record import record_error, record_error_async

__all__ = [
    # Core functionality
    "GeneratorFixture",
    "FixtureState",
    "Flow",
    "FlowStep",
    "Resume",
    "SuspendableComputation",
    "GeneratorComputation",
    "StepResult",
    "FixtureConfig",
    "RestartPolicy",
    "load_flow",
    "dump_flow",
    "__version__",
    # Helpers
    "Builder",
    "AutoBuilder",
    "for_all",
    "p",
    "pretty",
    "record_error",
    "record_error_async",
    # Exceptions
    "GenTestError",
    "FixtureStateError",
    "NotConfiguredError",
    "InvalidStateError",
    "NotStartedError",
    "NotFoundError",
    "FlowDefinitionError",
    "FlowLoadError",
    "ConfigurationError",
]
