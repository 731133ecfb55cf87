"""Configuration for property-based tests.

This module registers Hypothesis profiles for the property suite. Select
one with ``--hypothesis-profile``.
"""

from hypothesis import HealthCheck, Verbosity, settings

# Default settings for property tests
settings.register_profile(
    "default",
    max_examples=100,
    deadline=2000,
    suppress_health_check=[HealthCheck.too_slow],
)

# Fast settings for CI or quick testing
settings.register_profile(
    "fast",
    max_examples=25,
    deadline=1000,
    suppress_health_check=[HealthCheck.too_slow],
)

# Thorough settings for comprehensive testing
settings.register_profile(
    "thorough",
    max_examples=500,
    deadline=None,
)

# Development settings for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
)

settings.load_profile("default")
