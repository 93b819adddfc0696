"""
Configuration Settings
Project-wide configuration parameters
"""

import logging

# Sequence sorted by every demonstration (each one sorts its own copy)
DEMO_DATA = [5, 2, 9, 1]

# Logging settings
# Logs go to stderr; stdout carries only the sorted results.
LOG_LEVEL = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def validate_settings():
    """
    Validate configuration settings

    Returns:
        bool: True if all settings are valid
    """
    if not all(isinstance(n, int) and not isinstance(n, bool) for n in DEMO_DATA):
        raise ValueError("Demo data must contain only integers")

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise ValueError(f"Unknown log level: {LOG_LEVEL}")

    return True
