"""
Comparison-Parameterized Sorting
Main entry point: sorts the demo data with each comparison binding and prints the results
"""

import sys
import logging

from config import settings
from src.sorting import run_demonstrations, format_sequence


def setup_logging():
    """Configure logging for the application"""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    return logging.getLogger(__name__)


def main():
    settings.validate_settings()
    logger = setup_logging()

    logger.info(f"Sorting {settings.DEMO_DATA} three ways")
    for _, result in run_demonstrations(settings.DEMO_DATA):
        print(format_sequence(result))

    logger.info("Done")
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    run()
