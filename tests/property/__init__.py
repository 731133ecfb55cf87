"""Property-based tests for gentest.

This package uses Hypothesis to check the stepping invariants of
GeneratorFixture over generated generators, flows and targets.
"""
