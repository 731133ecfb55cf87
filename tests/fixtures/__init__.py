"""Test fixtures for gentest.

- generators: Sample generators and the Recorder used to observe what a
  driven generator receives
"""

__all__ = ["generators"]
