"""Common exceptions for gentest.

This module defines the exception types raised by the generator fixture,
the flow index and the flow loaders. Misuse of the fixture is reported
through ``FixtureStateError`` subclasses; exceptions raised by the driven
generator itself are never wrapped.
"""

from typing import Any


class GenTestError(Exception):
    """Base exception for all gentest errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.message = message
        self.context = context or {}


class FixtureStateError(GenTestError):
    """Raised when a fixture operation is called in the wrong state."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize state error with the offending operation."""
        super().__init__(message, context)
        self.operation = operation


class NotConfiguredError(FixtureStateError):
    """Raised when starting a fixture that has no computation."""


class InvalidStateError(FixtureStateError):
    """Raised when reconfiguring (or restarting) a running fixture."""


class NotStartedError(FixtureStateError):
    """Raised when stepping a fixture before ``start`` was called."""


class NotFoundError(GenTestError):
    """Raised when a step name cannot be resolved in a flow."""

    def __init__(
        self,
        message: str,
        step_name: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize lookup error with the missing step name."""
        super().__init__(message, context)
        self.step_name = step_name


class FlowDefinitionError(GenTestError):
    """Raised when flow step records are invalid."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize flow definition error with validation details."""
        super().__init__(message, context)
        self.errors = errors or []


class FlowLoadError(FlowDefinitionError):
    """Raised when a flow file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        errors: list[dict[str, Any]] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize loader error with location information."""
        parts = [message]
        if file_path:
            parts.append(f"in file '{file_path}'")
        if line is not None:
            parts.append(f"at line {line}")
        super().__init__(" ".join(parts), errors, context)
        self.file_path = file_path
        self.line = line


class ConfigurationError(GenTestError):
    """Raised when fixture configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key


__all__ = [
    'GenTestError',
    'FixtureStateError',
    'NotConfiguredError',
    'InvalidStateError',
    'NotStartedError',
    'NotFoundError',
    'FlowDefinitionError',
    'FlowLoadError',
    'ConfigurationError',
]
