"""Configuration module for the airlock controller.

Available Configurations:
- AirlockConfig: Airlock names, timer delay and device tag settings
"""

from airlock.config.airlock_config import (
    DEFAULT_AIRLOCK_CONFIG,
    AirlockConfig,
    parse_tag_wrapper,
    split_names,
)

__all__ = [
    "AirlockConfig",
    "DEFAULT_AIRLOCK_CONFIG",
    "parse_tag_wrapper",
    "split_names",
]
