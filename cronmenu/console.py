"""
Interactive crontab console.

Each action takes the store it works on and a ``prompt`` callable used to
read a line from the user (``input`` by default), so every flow can be
driven from a script or a test.

Add and remove follow the store's snapshot-replace contract: fetch the
full entry list, change it in memory, write the full list back with a
single ``replace_all()`` call.
"""

import logging
import re
from typing import Callable, List, Optional

from cronmenu.reference import (
    EXAMPLES_HEADERS, EXAMPLE_ENTRIES,
    SYNTAX_TITLE, SYNTAX_HEADERS, SYNTAX_FIELDS,
    ENTRY_FORMAT_TITLE, ENTRY_FORMAT,
)
from cronmenu.store import CrontabError, CrontabReadError
from cronmenu.tables import print_table, numbered_rows

logger = logging.getLogger(__name__)

PLACEHOLDER = "No current cron jobs"
ENTRY_HEADERS = ["#", "Cron Job"]

HELP_TOKEN = "help"
BACK_TOKEN = "back"

ENTRY_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

Prompt = Callable[[str], str]


def print_example_commands(color: bool = True):
    print_table(EXAMPLES_HEADERS, EXAMPLE_ENTRIES, style='bright', color=color)


def print_entry_format(color: bool = True):
    print_table(None, ENTRY_FORMAT, title=ENTRY_FORMAT_TITLE, style='green', color=color)


def print_syntax_table(color: bool = True):
    """Print the field syntax table followed by the entry format."""
    print()
    print_table(SYNTAX_HEADERS, SYNTAX_FIELDS, title=SYNTAX_TITLE, style='bright', color=color)
    print()
    print_entry_format(color=color)


def show_help(color: bool = True):
    """Print the syntax reference and the example entries. No store access."""
    print_syntax_table(color=color)
    print()
    print_example_commands(color=color)


def list_entries(store, color: bool = True) -> Optional[List[str]]:
    """
    Show the current crontab as a numbered table.

    Returns:
        The entries shown, or None if the crontab could not be read
    """
    try:
        entries = store.fetch_all()
    except CrontabReadError as e:
        print(f"Error fetching cron jobs: {e}")
        return None

    print()
    print_table(
        ENTRY_HEADERS,
        numbered_rows(entries, PLACEHOLDER),
        title="Current Cron Jobs",
        style='green',
        color=color
    )
    return entries


def append_entry(store, entry: str):
    """
    Append one entry to the crontab.

    Raises:
        CrontabError: If the snapshot cannot be read or the write fails
    """
    entries = store.fetch_all()
    entries.append(entry)
    store.replace_all(entries)
    logger.info(f"Added entry: {entry}")


def parse_entry_number(text: str, count: int) -> int:
    """
    Parse a 1-based entry number typed by the user.

    Only plain ASCII decimal digits with an optional sign are accepted.

    Raises:
        ValueError: If ``text`` is not such a number or is outside [1, count]
    """
    text = text.strip()
    if not ENTRY_NUMBER_RE.fullmatch(text):
        raise ValueError(f"Not an entry number: {text!r}")

    number = int(text)
    if number < 1 or number > count:
        raise ValueError(f"Entry number must be between 1 and {count}")
    return number


def delete_entry(store, entries: List[str], number: int) -> str:
    """
    Remove the ``number``-th (1-based) entry of ``entries`` and write
    the rest back.

    Returns:
        The removed entry

    Raises:
        ValueError: If ``number`` is out of range
        CrontabWriteError: If the write fails
    """
    if number < 1 or number > len(entries):
        raise ValueError(f"Entry number must be between 1 and {len(entries)}")

    remaining = list(entries)
    removed = remaining.pop(number - 1)
    store.replace_all(remaining)
    logger.info(f"Removed entry #{number}: {removed}")
    return removed


def add_entry(store, prompt: Prompt = input, color: bool = True):
    """
    Interactive add flow.

    'help' shows the syntax tables and asks again, 'back' returns without
    changes, anything else is appended to the crontab as-is.
    """
    while True:
        list_entries(store, color=color)

        print("\n")
        print_example_commands(color=color)
        print(f"\nEnter '{HELP_TOKEN}' for detailed cron syntax information.")
        print(f"Enter '{BACK_TOKEN}' to return to the main menu.")
        print("\nEnter a new cron job:")

        entry = prompt("\n> ").strip()

        if entry.lower() == HELP_TOKEN:
            print_syntax_table(color=color)
            continue
        if entry.lower() == BACK_TOKEN:
            return
        if not entry:
            continue

        try:
            append_entry(store, entry)
        except CrontabReadError as e:
            print(f"Error fetching cron jobs: {e}")
        except CrontabError as e:
            print(f"Error updating cron jobs: {e}")
        else:
            print("Cron job added successfully!")
        return


def remove_entry(store, prompt: Prompt = input, color: bool = True):
    """
    Interactive remove flow.

    Shows the numbered entries and removes the one the user picks.
    Anything other than 'back' or a valid number aborts with no changes.
    """
    try:
        entries = store.fetch_all()
    except CrontabReadError as e:
        print(f"Error fetching cron jobs: {e}")
        return
    print("\n")

    print_table(
        ENTRY_HEADERS,
        numbered_rows(entries, PLACEHOLDER),
        title="Remove Cron Jobs",
        style='red',
        color=color
    )
    if not entries:
        return

    print("\nEnter the number (#) of the job to remove.")
    print(f"Enter '{BACK_TOKEN}' to return to the main menu.")

    choice = prompt("\n> ").strip()
    if choice.lower() == BACK_TOKEN:
        return

    try:
        number = parse_entry_number(choice, len(entries))
    except ValueError:
        print("Invalid choice!")
        return

    try:
        delete_entry(store, entries, number)
    except CrontabError as e:
        print(f"Error updating cron jobs: {e}")
    else:
        print("Cron job removed successfully!")


MENU = """
Cron Job Manager

1. List Cron Jobs
2. Add Cron Job
3. Remove Cron Job
4. Show syntax help
5. Exit"""


def run_menu(store, prompt: Prompt = input, color: bool = True) -> int:
    """
    Top-level menu loop.

    Returns:
        Exit code (0) once the user exits or input ends
    """
    actions = {
        '1': lambda: list_entries(store, color=color),
        '2': lambda: add_entry(store, prompt=prompt, color=color),
        '3': lambda: remove_entry(store, prompt=prompt, color=color),
        '4': lambda: show_help(color=color),
    }

    while True:
        print(MENU)
        try:
            choice = prompt("Choose an option: ").strip()
            if choice == '5':
                print("Exiting...")
                return 0

            action = actions.get(choice)
            if action is None:
                print("Invalid option. Please try again.")
                continue
            action()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            return 0
        except CrontabError as e:
            logger.error(f"Unhandled crontab error: {e}")
            print(f"Error: {e}")
