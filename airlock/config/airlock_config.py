"""Airlock controller configuration.

Defines the per-installation settings consumed read-only at connection
time, with environment variable overrides.

Environment Variables:
- AIRLOCK_NAMES: Airlock names separated by AIRLOCK_DELIMITER (default: none)
- AIRLOCK_DELIMITER: Single-character list separator (default: ",")
- AIRLOCK_TIMER_DELAY: Seconds between cycle ticks (default: 1, min: 1, max: 60)
- AIRLOCK_TAG_WRAPPER: Opening and closing tag text separated by the
  delimiter, e.g. "[,]" (default: no wrapping)
- AIRLOCK_TIMER_NAME: Name of the shared timer device (default: "Airlock Timer")
- AIRLOCK_ENV: "production" for JSON logs, anything else for console logs
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# =============================================================================
# Timer Configuration
# =============================================================================

DEFAULT_TIMER_DELAY_SECONDS = 1

MIN_TIMER_DELAY_SECONDS = 1

MAX_TIMER_DELAY_SECONDS = 60

# =============================================================================
# Naming Configuration
# =============================================================================

DEFAULT_DELIMITER = ","

DEFAULT_TIMER_NAME = "Airlock Timer"

NO_TAG_WRAPPER: tuple[str, str] = ("", "")

DEFAULT_ENVIRONMENT = "production"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def split_names(raw: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, ...]:
    """Split a delimited name list, dropping blanks and surrounding space.

    Args:
        raw: Delimited names, e.g. "Hangar, Bridge".
        delimiter: List separator.

    Returns:
        Tuple of names in their original order.
    """
    return tuple(name.strip() for name in raw.split(delimiter) if name.strip())


def parse_tag_wrapper(raw: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str]:
    """Parse an opening/closing tag pair.

    Anything other than exactly two parts means no wrapping.

    Args:
        raw: Delimited pair, e.g. "[,]".
        delimiter: Pair separator.

    Returns:
        (opening, closing) tag text.
    """
    parts = raw.split(delimiter)
    if len(parts) != 2:
        return NO_TAG_WRAPPER
    return (parts[0], parts[1])


@dataclass(frozen=True)
class AirlockConfig:
    """Configuration for an airlock installation.

    Attributes:
        airlock_names: Airlocks to connect, in order. Must be unique.
        delimiter: Single character separating list values in raw settings.
        timer_delay_seconds: Seconds between cycle ticks.
            Default: 1. Minimum: 1. Maximum: 60.
        tag_wrapper: Text placed before and after an airlock name to form
            its device search tag.
        timer_name: Name of the shared timer device.
        environment: Log rendering environment.
    """

    airlock_names: tuple[str, ...] = ()
    delimiter: str = DEFAULT_DELIMITER
    timer_delay_seconds: int = DEFAULT_TIMER_DELAY_SECONDS
    tag_wrapper: tuple[str, str] = NO_TAG_WRAPPER
    timer_name: str = DEFAULT_TIMER_NAME
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.airlock_names, tuple):
            object.__setattr__(self, "airlock_names", tuple(self.airlock_names))
        if len(set(self.airlock_names)) != len(self.airlock_names):
            raise ValueError(
                f"airlock_names must be unique, got {list(self.airlock_names)}"
            )
        if any(not name.strip() for name in self.airlock_names):
            raise ValueError("airlock_names must not contain blank names")
        if len(self.delimiter) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )
        if (
            not MIN_TIMER_DELAY_SECONDS
            <= self.timer_delay_seconds
            <= MAX_TIMER_DELAY_SECONDS
        ):
            raise ValueError(
                f"timer_delay_seconds must be between {MIN_TIMER_DELAY_SECONDS} "
                f"and {MAX_TIMER_DELAY_SECONDS}, got {self.timer_delay_seconds}"
            )
        if len(self.tag_wrapper) != 2:
            raise ValueError(
                f"tag_wrapper must be an (opening, closing) pair, got {self.tag_wrapper!r}"
            )
        if not self.timer_name.strip():
            raise ValueError("timer_name must not be blank")

    def wrap_tag(self, airlock_name: str) -> str:
        """Build the device search tag for an airlock.

        Args:
            airlock_name: Configured airlock name.

        Returns:
            The name surrounded by the configured tag wrapper.
        """
        opening, closing = self.tag_wrapper
        return f"{opening}{airlock_name}{closing}"

    @classmethod
    def from_environment(cls) -> AirlockConfig:
        """Create configuration from environment variables.

        Returns:
            AirlockConfig with values from environment or defaults.

        Raises:
            ValueError: If environment values fail validation.
        """
        delimiter = os.environ.get("AIRLOCK_DELIMITER", DEFAULT_DELIMITER)
        return cls(
            airlock_names=split_names(os.environ.get("AIRLOCK_NAMES", ""), delimiter),
            delimiter=delimiter,
            timer_delay_seconds=_get_int_env(
                "AIRLOCK_TIMER_DELAY", DEFAULT_TIMER_DELAY_SECONDS
            ),
            tag_wrapper=parse_tag_wrapper(
                os.environ.get("AIRLOCK_TAG_WRAPPER", ""), delimiter
            ),
            timer_name=os.environ.get("AIRLOCK_TIMER_NAME", DEFAULT_TIMER_NAME),
            environment=os.environ.get("AIRLOCK_ENV", DEFAULT_ENVIRONMENT),
        )


# Pre-defined configurations
DEFAULT_AIRLOCK_CONFIG = AirlockConfig()
