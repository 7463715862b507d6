"""Configuration settings for Threadpath."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class InputMode(str, Enum):
    """How stroked shapes of an input drawing are turned into stitches."""

    NORMAL = "normal"
    FRITZING09 = "fritzing09"


class SamplerConfig(BaseModel):
    """Configuration for sampling stitch points along curves.

    All lengths are in millimetres.
    """

    curve_segments: int = Field(
        default=32,
        ge=1,
        le=1024,
        description="Number of sub-intervals in each curve's arc-length table",
    )
    line_pitch: float = Field(
        default=2.0,
        gt=0.0,
        le=12.7,
        description="Target distance between consecutive stitches (mm)",
    )
    tail_snap_ratio: float = Field(
        default=0.25,
        ge=0.0,
        le=1.0,
        description="Leftover fraction of pitch below which the last stitch is moved onto the path end",
    )


class PatternConfig(BaseModel):
    """Configuration for stitch patterns."""

    star_size: float = Field(
        default=2.0,
        gt=0.0,
        le=10.0,
        description="Junction star diameter (mm)",
    )
    triple_stitch_width: float = Field(
        default=0.1,
        ge=0.0,
        description="Stroke width at and above which paths are stitched three times (mm)",
    )
    connector_pitch_ratio: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="Pitch multiplier for Fritzing connector outlines",
    )


class InputConfig(BaseModel):
    """Configuration for reading input drawings."""

    mode: InputMode = Field(
        default=InputMode.NORMAL,
        description="Shape interpretation mode",
    )
    dpi: float = Field(
        default=90.0,
        gt=0.0,
        description="User units per inch for coordinates without physical units",
    )


class OptimizerConfig(BaseModel):
    """Configuration for stitch order optimization."""

    enabled: bool = Field(
        default=True,
        description="Reorder segments to minimize jumps",
    )


class OutputConfig(BaseModel):
    """Configuration for the embroidery file writer."""

    thread_color: str = Field(
        default="#000000",
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Thread colour as #RRGGBB",
    )
    thread_name: str = Field(default="Black", description="Thread description")
    thread_catalog: str = Field(default="900", description="Thread catalog number")
    flip_y: bool = Field(
        default=True,
        description="Invert the vertical axis (drawing y grows down, machine y grows up)",
    )
    units_per_mm: float = Field(
        default=10.0,
        gt=0.0,
        description="Embroidery units per millimetre",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ThreadpathSettings(BaseModel):
    """Main application settings."""

    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    pattern: PatternConfig = Field(default_factory=PatternConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ThreadpathSettings:
    """Get default application settings."""
    return ThreadpathSettings()
