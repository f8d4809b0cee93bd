"""Logging utilities with color support."""

import sys


class Colors:
    """ANSI color codes for terminal output."""
    BLUE = "\033[94m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    RESET = "\033[0m"


_quiet = False


def set_quiet(quiet: bool):
    """Silence informational output (errors and warnings are always shown).

    Args:
        quiet: True to suppress log_info and log_success
    """
    global _quiet
    _quiet = quiet


def log_info(msg: str):
    """Log informational message in blue.

    Args:
        msg: Message to log
    """
    if not _quiet:
        print(f"{Colors.BLUE}[INFO]{Colors.RESET} {msg}")


def log_success(msg: str):
    """Log success message in green.

    Args:
        msg: Message to log
    """
    if not _quiet:
        print(f"{Colors.GREEN}[SUCCESS]{Colors.RESET} {msg}")


def log_warning(msg: str):
    """Log warning message in yellow.

    Args:
        msg: Message to log
    """
    print(f"{Colors.YELLOW}[WARNING]{Colors.RESET} {msg}")


def log_error(msg: str):
    """Log error message in red to stderr.

    Args:
        msg: Message to log
    """
    print(f"{Colors.RED}[ERROR]{Colors.RESET} {msg}", file=sys.stderr)
