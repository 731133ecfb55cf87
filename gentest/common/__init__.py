"""Shared exceptions for gentest."""

from .exceptions import (
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

__all__ = [
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
