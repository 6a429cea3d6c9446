"""
Cron Job Manager

Interactive console for viewing, adding and removing entries in the
current user's crontab.

Main Components:
- CrontabStore: snapshot-replace access to the crontab program
- Console actions: list_entries, add_entry, remove_entry, show_help, run_menu
- ConsoleConfig: configuration file and environment overrides
"""

from cronmenu.store import (
    CrontabStore, CrontabError, CrontabReadError, CrontabWriteError,
    parse_entries, format_entries,
)
from cronmenu.console import list_entries, add_entry, remove_entry, show_help, run_menu
from cronmenu.config import ConsoleConfig

__version__ = "0.1.0"

__all__ = [
    # Store
    "CrontabStore",
    "CrontabError",
    "CrontabReadError",
    "CrontabWriteError",
    "parse_entries",
    "format_entries",
    # Console
    "list_entries",
    "add_entry",
    "remove_entry",
    "show_help",
    "run_menu",
    # Configuration
    "ConsoleConfig",
]
