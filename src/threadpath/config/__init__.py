"""Configuration management for threadpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplerConfig: Curve sampling resolution and stitch pitch
- PatternConfig: Star size and triple stitch threshold
- InputConfig: Input interpretation mode and units
- OptimizerConfig: Stitch order optimization switch
- OutputConfig: Thread and coordinate settings for the writer
- LoggingConfig: Logging settings
- ThreadpathSettings: Main application settings
"""

from threadpath.config.settings import (
    InputConfig,
    InputMode,
    LoggingConfig,
    OptimizerConfig,
    OutputConfig,
    PatternConfig,
    SamplerConfig,
    ThreadpathSettings,
    get_default_settings,
)

__all__ = [
    "InputConfig",
    "InputMode",
    "LoggingConfig",
    "OptimizerConfig",
    "OutputConfig",
    "PatternConfig",
    "SamplerConfig",
    "ThreadpathSettings",
    "get_default_settings",
]
