"""
Command-line interface for the crontab console.

Without a subcommand the interactive menu is started. The subcommands
run a single action and exit:
- list: show current entries
- add: append one entry
- remove: remove an entry by its number
- syntax: show the cron syntax reference
- init / show-config: manage the configuration file
"""

import argparse
import logging
import sys
from pathlib import Path

from cronmenu.config import ConsoleConfig
from cronmenu.console import (
    run_menu, list_entries, append_entry, delete_entry, parse_entry_number, show_help,
)
from cronmenu.store import CrontabError, CrontabReadError

logger = logging.getLogger(__name__)


def setup_logging(log_file: str = None, level: str = "INFO", verbose: bool = False):
    """
    Setup logging configuration.

    Records always go to the log file. They are echoed to the console
    only in verbose mode, so they don't interleave with the menu.
    """
    level = logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop handlers from a previous call
    for handler in list(root_logger.handlers):
        if getattr(handler, '_cronmenu', False):
            root_logger.removeHandler(handler)
            handler.close()

    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler._cronmenu = True
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8", errors="backslashreplace")
        except OSError as e:
            print(f"Warning: cannot write log file {log_path}: {e}", file=sys.stderr)
            return

        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        ))
        file_handler._cronmenu = True
        root_logger.addHandler(file_handler)


def cmd_menu(args, config: ConsoleConfig) -> int:
    """Run the interactive menu."""
    return run_menu(config.create_store(), color=args.color)


def cmd_list(args, config: ConsoleConfig) -> int:
    """List crontab entries."""
    entries = list_entries(config.create_store(), color=args.color)
    return 1 if entries is None else 0


def cmd_add(args, config: ConsoleConfig) -> int:
    """Append one entry to the crontab."""
    entry = args.entry.strip()
    if not entry:
        print("Cron job cannot be empty")
        return 1

    try:
        append_entry(config.create_store(), entry)
    except CrontabReadError as e:
        print(f"Error fetching cron jobs: {e}")
        return 1
    except CrontabError as e:
        print(f"Error updating cron jobs: {e}")
        return 1

    print("Cron job added successfully!")
    return 0


def cmd_remove(args, config: ConsoleConfig) -> int:
    """Remove the entry with the given number."""
    store = config.create_store()
    try:
        entries = store.fetch_all()
    except CrontabReadError as e:
        print(f"Error fetching cron jobs: {e}")
        return 1

    try:
        removed = delete_entry(store, entries, parse_entry_number(args.number, len(entries)))
    except ValueError:
        print("Invalid choice!")
        return 1
    except CrontabError as e:
        print(f"Error updating cron jobs: {e}")
        return 1

    print(f"Cron job removed successfully! ({removed})")
    return 0


def cmd_syntax(args, config: ConsoleConfig) -> int:
    """Show the cron syntax reference."""
    show_help(color=args.color)
    return 0


def cmd_init(args, config: ConsoleConfig) -> int:
    """Write the configuration file."""
    config.save()
    print(f"Initialized configuration at: {config.config_path}")
    return 0


def cmd_show_config(args, config: ConsoleConfig) -> int:
    """Show current configuration."""
    print(f"\nConfiguration file: {config.config_path}")
    print(f"Crontab command: {config.crontab_command}")
    print(f"User: {config.user or '(current user)'}")
    print(f"Color: {'on' if config.color else 'off'}")
    print(f"Logging level: {config.logging.level}")
    print(f"Log file: {config.logging.file}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cronmenu",
        description="Cron Job Manager - list, add and remove entries in your crontab",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '-c', '--config',
        type=str,
        help='Path to configuration file'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='Log file path'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable coloured tables'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    menu_parser = subparsers.add_parser('menu', help='Start the interactive menu (default)')
    menu_parser.set_defaults(func=cmd_menu)

    list_parser = subparsers.add_parser('list', help='List cron jobs')
    list_parser.set_defaults(func=cmd_list)

    add_parser = subparsers.add_parser('add', help='Add a cron job')
    add_parser.add_argument('entry', help="Cron job line, e.g. '*/5 * * * * ping -c 4 host'")
    add_parser.set_defaults(func=cmd_add)

    remove_parser = subparsers.add_parser('remove', help='Remove a cron job by number')
    remove_parser.add_argument('number', help="Job number as shown by 'list'")
    remove_parser.set_defaults(func=cmd_remove)

    syntax_parser = subparsers.add_parser('syntax', help='Show cron syntax help')
    syntax_parser.set_defaults(func=cmd_syntax)

    init_parser = subparsers.add_parser('init', help='Write the configuration file')
    init_parser.set_defaults(func=cmd_init)

    show_config_parser = subparsers.add_parser('show-config', help='Show configuration')
    show_config_parser.set_defaults(func=cmd_show_config)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConsoleConfig(args.config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Config error: {error}")
        return 1

    setup_logging(
        log_file=args.log_file or config.logging.file,
        level=config.logging.level,
        verbose=args.verbose
    )

    args.color = config.color and not args.no_color
    func = getattr(args, 'func', cmd_menu)
    logger.debug(f"Running command: {args.command or 'menu'}")
    return func(args, config)


if __name__ == '__main__':
    sys.exit(main())
