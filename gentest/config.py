# gentest/config.py
from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any, TypedDict

from gentest.common.exceptions import ConfigurationError
from gentest.constants import (
    DEFAULT_LOG_RESUMES,
    DEFAULT_RESTART_POLICY,
    ENV_RESTART_POLICY,
    get_log_resumes,
    get_restart_policy,
)


class RestartPolicy(StrEnum):
    """What ``GeneratorFixture.start`` does when the fixture is already running"""
    RESET = "reset"  # Re-create the computation and rewind the cursor
    RAISE = "raise"  # Refuse with InvalidStateError


class FixtureConfigDict(TypedDict, total=False):
    """TypedDict for fixture configuration dictionary"""
    restart_policy: str
    log_resumes: bool


@dataclass(frozen=True)
class FixtureConfig:
    """Configuration for a GeneratorFixture"""

    restart_policy: RestartPolicy = RestartPolicy.RESET
    log_resumes: bool = DEFAULT_LOG_RESUMES

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not isinstance(self.restart_policy, RestartPolicy):
            raise ConfigurationError(
                f"restart_policy must be a RestartPolicy, got {self.restart_policy!r}",
                config_key="restart_policy",
            )

    @classmethod
    def from_env(cls) -> 'FixtureConfig':
        """Create configuration from GENTEST_* environment variables"""
        policy_str = get_restart_policy()
        try:
            restart_policy = RestartPolicy(policy_str)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid {ENV_RESTART_POLICY}: {policy_str!r}",
                config_key="restart_policy",
            ) from e

        return cls(restart_policy=restart_policy, log_resumes=get_log_resumes())

    @classmethod
    def from_dict(cls, config_dict: FixtureConfigDict) -> 'FixtureConfig':
        """Create configuration from typed dictionary"""
        policy_str = config_dict.get('restart_policy', DEFAULT_RESTART_POLICY)
        try:
            restart_policy = RestartPolicy(str(policy_str).lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid restart_policy: {policy_str}",
                config_key="restart_policy",
            ) from e

        log_resumes = config_dict.get('log_resumes', DEFAULT_LOG_RESUMES)
        if not isinstance(log_resumes, bool):
            raise ConfigurationError(
                f"log_resumes must be a boolean, got {type(log_resumes).__name__}",
                config_key="log_resumes",
            )

        return cls(restart_policy=restart_policy, log_resumes=log_resumes)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        data = asdict(self)
        data['restart_policy'] = self.restart_policy.value
        return data
