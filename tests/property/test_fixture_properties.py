"""Property-based tests for GeneratorFixture stepping.

Key properties tested:
- start() performs exactly one resume
- Forwarding to a target at or behind the cursor changes nothing
- advance_to(N, v) equals N - position - 1 plain steps followed by one step with v
- Forwarding over flow steps sends each step's defaults
- Forwarding by name equals forwarding by the index the name resolves to
- Explicit exceptions are thrown at the target only
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gentest import Flow, GeneratorFixture
from tests.fixtures.generators import Recorder
from tests.property.generators import (
    flow_records,
    sent_values,
    steps_and_target,
    yield_values,
)

pytestmark = pytest.mark.property


def from_values(values):
    yield from values


def observed(fixture: GeneratorFixture, recorder: Recorder) -> tuple:
    return (
        fixture.value,
        fixture.done,
        fixture.position,
        recorder.received,
        [type(e) for e in recorder.caught],
    )


class TestStartProperties:
    @given(values=yield_values)
    def test_start_lands_on_first_value(self, values):
        """start() should expose the first yielded value after one resume."""
        fixture = GeneratorFixture(from_values).start(values)

        assert fixture.value == values[0]
        assert fixture.done is False
        assert fixture.position == 1


class TestForwardingProperties:
    """Property-based tests for advance_to."""

    @given(values=yield_values, data=st.data())
    def test_backward_target_is_a_no_op(self, values, data):
        """Forwarding to a point at or behind the cursor leaves all state unchanged."""
        forward = data.draw(st.integers(min_value=1, max_value=len(values)))
        fixture = GeneratorFixture(from_values).start(values).advance_to(forward)
        before = (fixture.value, fixture.done, fixture.position)

        backward = data.draw(st.integers(min_value=-5, max_value=forward))
        fixture.advance_to(backward)

        assert (fixture.value, fixture.done, fixture.position) == before
        assert fixture.value == values[forward - 1]

    @given(plan=steps_and_target(), value=sent_values)
    def test_advance_to_equals_repeated_advance_one(self, plan, value):
        """advance_to(N, v) == advance_one() * (N - position - 1) + advance_one(v) without a flow."""
        steps, target = plan
        recorder_a, recorder_b = Recorder(), Recorder()

        forwarded = GeneratorFixture(recorder_a.catching).start(steps)
        forwarded.advance_to(target, value)

        stepped = GeneratorFixture(recorder_b.catching).start(steps)
        for _ in range(target - stepped.position - 1):
            stepped.advance_one()
        stepped.advance_one(value)

        assert observed(forwarded, recorder_a) == observed(stepped, recorder_b)

    @given(records=flow_records(min_size=1), data=st.data())
    def test_forwarding_sends_flow_defaults(self, records, data):
        """Each resume while forwarding uses the defaults of the step being left."""
        flow = Flow.from_records(records)
        steps = len(records) + 2
        target = data.draw(st.integers(min_value=2, max_value=steps))
        recorder_a, recorder_b = Recorder(), Recorder()

        forwarded = GeneratorFixture(recorder_a.catching, flow=flow).start(steps)
        forwarded.advance_to(target)

        stepped = GeneratorFixture(recorder_b.catching).start(steps)
        while stepped.position < target:
            instruction = flow.defaults_for(stepped.position)
            if instruction.throw:
                stepped.advance_one(instruction.value, throw=True)
            else:
                stepped.advance_one(instruction.value)

        assert observed(forwarded, recorder_a) == observed(stepped, recorder_b)

    @given(records=flow_records(min_size=1, unique_names=True), data=st.data())
    def test_name_and_index_targets_agree(self, records, data):
        """advance_to(flow[i].name) reaches the same state as advance_to(i + 2)."""
        index = data.draw(st.integers(min_value=0, max_value=len(records) - 1))
        steps = len(records) + 2
        recorder_a, recorder_b = Recorder(), Recorder()

        by_name = GeneratorFixture(recorder_a.catching, flow=records).start(steps)
        by_name.advance_to(records[index]["name"])

        by_index = GeneratorFixture(recorder_b.catching, flow=records).start(steps)
        by_index.advance_to(index + 2)

        assert observed(by_name, recorder_a) == observed(by_index, recorder_b)

    @given(plan=steps_and_target())
    def test_explicit_exception_thrown_at_target_only(self, plan):
        """Without flow exceptions, an explicit exception is seen exactly once, at the target."""
        steps, target = plan
        recorder = Recorder()
        fixture = GeneratorFixture(recorder.catching).start(steps)

        fixture.advance_to(target, KeyError("at target"), throw=True)

        assert [type(e) for e in recorder.caught] == [KeyError]
        assert len(recorder.received) == target - 2
        assert fixture.value == "KeyError"
