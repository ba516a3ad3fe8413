"""
Customer Projects Console

Menu-driven console for adding and listing solar customers and their projects.
"""

import argparse
import sys
import traceback

from app_config import Config
from console_menu import ConsoleMenu
from database import Database
from debug_logger import DebugLogger
from project_service import ProjectService


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Customer Projects Console - add and list customers and their projects'
    )
    parser.add_argument('--env-file', default='.env', help='Path to environment file (default: .env)')
    parser.add_argument('--db-file', help='SQLite database file')
    parser.add_argument('--log-file', help='Append debug log lines to this file')
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    return parser.parse_args(argv)


def run_menu(menu, logger):
    """Prompt for selections until the user presses Enter on an empty line"""
    running = True
    while running:
        try:
            running = menu.dispatch(menu.get_user_selection())
        except (EOFError, KeyboardInterrupt):
            print("\nExiting the menu...")
            running = False
        except Exception as e:
            logger.log(f"Operation failed: {e}\n{traceback.format_exc()}")
            print(f"\nError: {e}. Try again.")


def main(argv=None):
    """Main application entry point"""
    args = parse_args(argv)
    config = Config.from_env(args.env_file).apply_args(args)

    is_valid, error = config.validate()
    if not is_valid:
        print(f"Configuration error: {error}")
        sys.exit(1)

    logger = DebugLogger(config.log_file, console_debug=config.debug)
    logger.log(f"Database file: {config.db_file}")

    db = Database(config.db_file, logger)
    service = ProjectService(db, config.sql_directory)
    menu = ConsoleMenu(service, config)

    try:
        run_menu(menu, logger)
    finally:
        logger.close()


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    main()
