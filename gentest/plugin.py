"""pytest plugin exposing gentest fixtures.

Registered through the ``pytest11`` entry point, so installing gentest makes
the fixtures below available to every test module.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from gentest.config import FixtureConfig
from gentest.fixture import GeneratorFixture
from gentest.flow import Flow
from gentest.loader import load_flow


@pytest.fixture
def generator_fixture() -> GeneratorFixture:
    """A fresh, unconfigured GeneratorFixture configured from GENTEST_* variables."""
    return GeneratorFixture(config=FixtureConfig.from_env())


@pytest.fixture
def flow_loader() -> Callable[[str | Path], Flow]:
    """The ``load_flow`` function, for tests that keep flows in data files."""
    return load_flow
