"""Constants and default values for gentest configuration.

This module centralizes the environment variable names and defaults read
by ``gentest.config``.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "GENTEST_"

ENV_RESTART_POLICY: Final[str] = f"{ENV_VAR_PREFIX}RESTART_POLICY"
ENV_LOG_RESUMES: Final[str] = f"{ENV_VAR_PREFIX}LOG_RESUMES"


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_RESTART_POLICY: Final[str] = "reset"
DEFAULT_LOG_RESUMES: Final[bool] = False


# =============================================================================
# Flow File Constants
# =============================================================================

FILE_EXT_YAML: Final[str] = "yaml"
FILE_EXT_YML: Final[str] = "yml"
FILE_EXT_JSON: Final[str] = "json"

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (
    FILE_EXT_YAML,
    FILE_EXT_YML,
    FILE_EXT_JSON,
)


# =============================================================================
# Boolean String Parsing
# =============================================================================

TRUTHY_VALUES: Final[tuple[str, ...]] = ("true", "1", "yes", "on")
FALSY_VALUES: Final[tuple[str, ...]] = ("false", "0", "no", "off")


# =============================================================================
# Helper Functions
# =============================================================================


def parse_bool(value: str, default: bool) -> bool:
    """
    Parse a boolean from an environment string.

    Unrecognized strings fall back to ``default``.
    """
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    return default


def get_restart_policy() -> str:
    """Get the restart policy from the environment."""
    return os.getenv(ENV_RESTART_POLICY, DEFAULT_RESTART_POLICY).strip().lower()


def get_log_resumes() -> bool:
    """Get whether resumes should be logged from the environment."""
    value = os.getenv(ENV_LOG_RESUMES)
    if value is None:
        return DEFAULT_LOG_RESUMES
    return parse_bool(value, DEFAULT_LOG_RESUMES)
