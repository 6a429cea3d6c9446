"""
Crontab store access.

The user's crontab is only reachable through the ``crontab`` program, which
has no incremental edit operation. Every change is therefore a
snapshot-replace: read the whole entry list with ``fetch_all()``, change it
in memory, and hand the whole list back to ``replace_all()``.

Nothing here guards against another process editing the crontab between
the read and the write; the later write wins.
"""

import logging
import subprocess
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

# Marker printed by cron implementations when the user has no crontab yet
NOT_CONFIGURED_MARKER = "no crontab for"


class CrontabError(Exception):
    """Base class for crontab store failures."""
    pass


class CrontabReadError(CrontabError):
    """Raised when the crontab cannot be listed."""
    pass


class CrontabWriteError(CrontabError):
    """Raised when the crontab cannot be replaced."""
    pass


def _readable(text: str) -> str:
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def parse_entries(text: str) -> List[str]:
    """
    Split crontab output into entries.

    Each non-blank line is one entry; surrounding whitespace is stripped
    and line order is kept.
    """
    entries = []
    for line in text.splitlines():
        line = line.strip()
        if line:
            entries.append(line)
    return entries


def format_entries(entries: Sequence[str]) -> str:
    """Join entries back into crontab text (newline terminated)."""
    if not entries:
        return ""
    return "\n".join(entries) + "\n"


class CrontabStore:
    """
    Snapshot-replace access to one user's crontab.

    Args:
        command: crontab program to invoke
        user: Operate on this user's crontab (``-u``); None means the
              invoking user
    """

    def __init__(self, command: str = "crontab", user: Optional[str] = None):
        self.command = command
        self.user = user

    def _base_args(self) -> List[str]:
        args = [self.command]
        if self.user:
            args += ["-u", self.user]
        return args

    def fetch_all(self) -> List[str]:
        """
        Read every entry in the crontab.

        Returns:
            Ordered list of entries; empty when the user has no crontab

        Raises:
            CrontabReadError: If listing fails for any other reason
        """
        args = self._base_args() + ["-l"]
        logger.debug(f"Running: {' '.join(args)}")

        try:
            result = subprocess.run(
                args, capture_output=True, text=True, errors="surrogateescape"
            )
        except (OSError, UnicodeError) as e:
            logger.error(f"Could not run {self.command}: {e}")
            raise CrontabReadError(f"Could not run {self.command}: {e}") from e

        if result.returncode != 0:
            message = _readable(result.stderr or "").strip()
            if NOT_CONFIGURED_MARKER in message.lower():
                logger.info("No crontab configured, treating as empty")
                return []
            if not message:
                message = f"{self.command} exited with code {result.returncode}"
            logger.error(f"Failed to list crontab: {message}")
            raise CrontabReadError(message)

        entries = parse_entries(result.stdout or "")
        logger.info(f"Fetched {len(entries)} crontab entr{'y' if len(entries) == 1 else 'ies'}")
        return entries

    def replace_all(self, entries: Sequence[str]) -> None:
        """
        Overwrite the crontab with ``entries``.

        The text is passed on stdin; it never goes through a shell. Bytes
        that were undecodable on read are written back unchanged.

        Raises:
            CrontabWriteError: If the crontab program rejects the new content
        """
        args = self._base_args() + ["-"]
        content = format_entries(entries)
        logger.debug(f"Running: {' '.join(args)}")

        try:
            result = subprocess.run(
                args, input=content, capture_output=True, text=True, errors="surrogateescape"
            )
        except (OSError, UnicodeError) as e:
            logger.error(f"Could not run {self.command}: {e}")
            raise CrontabWriteError(f"Could not run {self.command}: {e}") from e

        if result.returncode != 0:
            message = _readable(result.stderr or "").strip()
            if not message:
                message = f"{self.command} exited with code {result.returncode}"
            logger.error(f"Failed to write crontab: {message}")
            raise CrontabWriteError(message)

        logger.info(f"Wrote {len(entries)} crontab entr{'y' if len(entries) == 1 else 'ies'}")

    def __repr__(self):
        return f"CrontabStore(command={self.command!r}, user={self.user!r})"
