"""Configuration constants."""

from .streaming_config import ROSTER_CONFIG, SAMPLING_CONFIG, RosterConfig, SamplingConfig

__all__ = ["ROSTER_CONFIG", "SAMPLING_CONFIG", "RosterConfig", "SamplingConfig"]
