"""Pytest configuration and fixtures for gentest tests.

This module provides shared recorders, flows and flow files for the
gentest test suite. The ``generator_fixture`` and ``flow_loader`` fixtures
come from ``gentest.plugin`` and are re-exported here so the suite also
runs when the package is not installed with its entry points.
"""

import json
from typing import Any

import pytest

from gentest.plugin import flow_loader, generator_fixture  # noqa: F401
from tests.fixtures.generators import Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def chained_steps() -> list[dict[str, Any]]:
    """Flow matching ``Recorder.chained``."""
    return [
        {"name": "second", "defaultValue": "default second"},
        {"name": "third"},
    ]


@pytest.fixture
def sample_flow_file(tmp_path):
    """Create a temporary YAML flow file."""
    content = """\
name: checkout
steps:
  - name: user
    defaultValue:
      id: 7
  - name: payment
    throws:
      type: ConnectionError
      message: gateway down
  - name: receipt
"""
    flow_file = tmp_path / "checkout.yaml"
    flow_file.write_text(content, encoding="utf-8")
    return flow_file


@pytest.fixture
def sample_json_flow_file(tmp_path):
    """Create a temporary JSON flow file holding a bare list of steps."""
    steps = [
        {"name": "second", "defaultValue": "D"},
        {"name": "third"},
    ]
    flow_file = tmp_path / "chained.json"
    flow_file.write_text(json.dumps(steps, indent=2), encoding="utf-8")
    return flow_file
