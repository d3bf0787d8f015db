"""
Main entry point for the transaction merge utility.

Loads configuration, reads and merges the transaction files and reports
summary statistics.
"""
import argparse
import locale
import sys
from pathlib import Path

# Add project root to Python path for module imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

# Load .env before any module logger reads LOG_LEVEL
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

from core.config import get_settings
from core.exceptions import ConfigurationError
from core.logger import TransactionLog, setup_logger
from services.merge_service import MergeService

logger = setup_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge transaction files and print summary statistics."
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Transaction files to merge, in order (defaults to INPUT_FILES)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main application entry point."""
    args = parse_args(argv)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        logger.warning(f"Cannot apply system locale, using defaults: {e}")

    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        return 1

    with TransactionLog(
        text_log_path=settings.text_log_path,
        csv_log_path=settings.csv_log_path,
        level=settings.log_level,
    ) as log:
        MergeService(settings).run(log, args.files or None)

    return 0


if __name__ == "__main__":
    sys.exit(main())
