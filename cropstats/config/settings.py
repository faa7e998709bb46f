"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
CROP_DATA_FILE = DATA_DIR / "crops.txt"
EXPORT_DIR = DATA_DIR / "exports"


def _env_plot_size(default: int = 72) -> int:
    """Read the plot size override from the environment."""
    raw = os.getenv("CROPSTATS_PLOT_SIZE", "")
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 1 else default


# Number of planting slots in one plot
DEFAULT_PLOT_SIZE = _env_plot_size()

# In-game calendar
CALENDAR_SETTINGS = {
    "season_length_days": 28,
    "week_length_days": 7,
}

# Crop table format
INPUT_SETTINGS = {
    "comment_marker": "#",
    "field_count": 5,
    "unavailable_season": "N/A",
}

# Verbose output
OUTPUT_SETTINGS = {
    "currency": "£",
    "value_width": 6,
    "separator_char": "-",
    "days_suffix": " days",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_log_level = os.getenv("CROPSTATS_LOG_LEVEL", "WARNING").upper()

# Logs go to stderr; stdout carries the statistics
LOGGING_SETTINGS = {
    "level": _log_level if _log_level in _LOG_LEVELS else "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
