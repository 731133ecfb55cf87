"""Tests for the fixtures provided by gentest.plugin."""

from gentest import FixtureConfig, FixtureState, GeneratorFixture, load_flow
from tests.fixtures.generators import sequential_generator


class TestPluginFixtures:
    def test_generator_fixture_is_fresh(self, generator_fixture):
        assert isinstance(generator_fixture, GeneratorFixture)
        assert generator_fixture.state == FixtureState.UNCONFIGURED
        assert isinstance(generator_fixture.config, FixtureConfig)

    def test_generator_fixture_drives_generator(self, generator_fixture):
        # Arrange & Act
        generator_fixture.configure(sequential_generator).start().advance_to(2)

        # Assert
        assert generator_fixture.value == "second"

    def test_flow_loader(self, flow_loader, sample_flow_file):
        assert flow_loader is load_flow
        assert flow_loader(sample_flow_file).names == ["user", "payment", "receipt"]
