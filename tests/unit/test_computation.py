"""Unit tests for gentest.computation."""

import pytest

from gentest.computation import (
    GeneratorComputation,
    StepResult,
    SuspendableComputation,
    as_computation,
    is_computation,
)
from tests.fixtures.generators import counting_generator, returning_generator


class StaticComputation:
    def resume(self, value=None):
        return StepResult(value, False)

    def throw(self, exception):
        raise exception


class TestGeneratorComputation:
    """Test suite for the generator adapter."""

    def test_resume_sends_value(self):
        # Arrange
        def echo():
            received = yield "ready"
            yield received

        computation = GeneratorComputation(echo())

        # Act & Assert
        assert computation.resume() == StepResult("ready", False)
        assert computation.resume("hello") == StepResult("hello", False)

    def test_stop_iteration_becomes_done(self):
        # Arrange
        computation = GeneratorComputation(returning_generator())
        computation.resume()

        # Act & Assert
        assert computation.resume() == StepResult("result", True)

    def test_finished_generator_keeps_reporting_done(self):
        # Arrange
        computation = GeneratorComputation(returning_generator())
        computation.resume()
        computation.resume()

        # Act & Assert
        assert computation.resume() == StepResult(None, True)

    def test_throw_handled_by_generator(self):
        # Arrange
        def handler():
            try:
                yield "waiting"
            except KeyError:
                yield "handled"

        computation = GeneratorComputation(handler())
        computation.resume()

        # Act & Assert
        assert computation.throw(KeyError("k")) == StepResult("handled", False)

    def test_throw_ending_generator_reports_done(self):
        # Arrange
        def handler():
            try:
                yield "waiting"
            except KeyError:
                return "gave up"

        computation = GeneratorComputation(handler())
        computation.resume()

        # Act & Assert
        assert computation.throw(KeyError("k")) == StepResult("gave up", True)

    def test_unhandled_throw_propagates(self):
        # Arrange
        computation = GeneratorComputation(returning_generator())
        computation.resume()

        # Act & Assert
        with pytest.raises(ValueError):
            computation.throw(ValueError("nope"))

    def test_close_runs_generator_cleanup(self):
        # Arrange
        cleaned = []

        def guarded():
            try:
                yield "open"
            finally:
                cleaned.append(True)

        computation = GeneratorComputation(guarded())
        computation.resume()

        # Act
        computation.close()

        # Assert
        assert cleaned == [True]
        assert computation.resume() == StepResult(None, True)

    def test_implements_protocol(self):
        # Arrange & Act & Assert
        assert isinstance(GeneratorComputation(returning_generator()), SuspendableComputation)


class TestAsComputation:
    """Test suite for normalizing configured sources."""

    def test_generator_function_called_with_arguments(self):
        # Arrange
        computation = as_computation(counting_generator, 3, step=2)
        computation.resume()

        # Act & Assert
        assert computation.resume() == StepResult(5, False)

    def test_generator_object_wrapped(self):
        # Arrange
        generator = returning_generator()

        # Act
        computation = as_computation(generator)

        # Assert
        assert isinstance(computation, GeneratorComputation)
        assert computation.generator is generator

    def test_computation_used_as_is(self):
        # Arrange
        computation = StaticComputation()

        # Act & Assert
        assert as_computation(computation) is computation

    def test_factory_returning_computation(self):
        # Arrange & Act
        computation = as_computation(StaticComputation)

        # Assert
        assert isinstance(computation, StaticComputation)

    def test_computation_class_is_not_a_computation(self):
        # Arrange & Act & Assert
        assert is_computation(StaticComputation) is False
        assert is_computation(StaticComputation()) is True

    def test_callable_returning_non_generator_rejected(self):
        # Act & Assert
        with pytest.raises(TypeError, match="expected a generator"):
            as_computation(lambda: [1, 2])

    @pytest.mark.parametrize("source", [42, "text", [1, 2]])
    def test_non_callable_rejected(self, source):
        # Act & Assert
        with pytest.raises(TypeError):
            as_computation(source)
