# mini_beam/config.py
"""
Analysis and display defaults.
"""

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Global analysis configuration."""

    # Package metadata
    app_name: str = "mini-beam"
    version: str = "0.1.0"

    # Analysis defaults
    default_condition: str = "simply-supported"
    default_n_points: int = 41
    default_j2: float = 1.0

    # Display
    display_decimals: int = 2
    figure_size: tuple = (8.0, 9.0)

    # Logging
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    log_datefmt: str = "%H:%M:%S"


# Global config instance
CONFIG = AnalysisConfig()
