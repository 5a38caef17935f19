"""
Rich logging setup for the fzyscore command line.

Nothing here runs on import: the matching library only logs through
module loggers, and the CLI entry point calls ``load_environment`` and
``setup_logging`` before dispatching commands.
"""

from rich.console import Console
from rich.logging import RichHandler
import logging
import os
from datetime import datetime

from dotenv import load_dotenv

# Rich console for log output; stderr keeps command output clean
console = Console(stderr=True)

# Default log group name
if os.getenv("environment"):
    DEFAULT_LOG_GROUP = f'fzyscore/{os.getenv("environment")}'
else:
    DEFAULT_LOG_GROUP = 'fzyscore'

current_log_group = DEFAULT_LOG_GROUP

TRUE_VALUES = {'true', '1', 'yes', 'on'}


class FzyscoreFormatter(logging.Formatter):
    def format(self, record):
        # Add timestamp in a consistent format
        record.asctime = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        # Add the log group if available
        record.log_group = current_log_group if current_log_group else 'fzyscore'
        return super().format(record)


def load_environment(path='.env'):
    """Load a .env file without overriding variables that are already set."""
    return load_dotenv(path, override=False)


def debug_enabled() -> bool:
    """Read the DEBUG environment variable as a boolean."""
    return os.getenv('DEBUG', '').strip().lower() in TRUE_VALUES


def setup_logging(log_group=DEFAULT_LOG_GROUP):
    global current_log_group

    current_log_group = log_group

    # Configure Rich handler with custom settings
    rich_handler = RichHandler(
        console=console,
        markup=False,
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
        show_level=False,  # Level is part of our own format string
        log_time_format='[%X]'
    )
    rich_handler.setFormatter(FzyscoreFormatter('%(asctime)s [%(log_group)s] [%(levelname)s] %(message)s'))

    # Configure root logger
    root_logger = logging.getLogger()

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Set level based on environment
    log_level = logging.DEBUG if debug_enabled() else logging.INFO
    root_logger.setLevel(log_level)
    root_logger.addHandler(rich_handler)


def set_log_group(new_log_group):
    """
    Change the log group shown in every formatted record.

    :param new_log_group: The name of the new log group to use
    """
    environment = os.getenv("environment")
    if environment:
        new_log_group = f"{new_log_group}/{environment}"

    setup_logging(new_log_group)
    logging.debug(f"Switched logging to group: {new_log_group}")


# Export the necessary functions and objects
__all__ = ['logging', 'load_environment', 'set_log_group', 'setup_logging', 'console']
