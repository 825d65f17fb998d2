"""
LogStore: newest-first, in-memory storage for HTTP log entries.

The current logs live in a ValueNotifier as a tuple. Every mutation
builds a new tuple and publishes it, so subscribers always receive a
complete snapshot that is never modified afterwards.

Nothing is persisted; the logs are lost when the process exits.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..models.log_models import LogEntry
from .notifier import ValueNotifier


logger = logging.getLogger(__name__)

Logs = Tuple[LogEntry, ...]


class LogStore:
    """Observable, newest-first list of LogEntry values.

    Parameters
    ----------
    max_entries:
        Optional upper bound on retained entries. When set, adding an entry
        beyond the bound drops the oldest ones. Defaults to None, which
        keeps every entry until `clear_logs()` is called.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._max_entries = max_entries
        self._logs_notifier: ValueNotifier[Logs] = ValueNotifier(())

    @property
    def logs_notifier(self) -> ValueNotifier[Logs]:
        """The underlying notifier, for callers that want it directly."""
        return self._logs_notifier

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    def add_log(self, log: LogEntry) -> None:
        """Put `log` at the head of the list and notify subscribers."""
        logs = (log,) + self._logs_notifier.value
        if self._max_entries is not None and len(logs) > self._max_entries:
            logger.debug(
                "[LOGS] Dropping %d oldest entries (max_entries=%d)",
                len(logs) - self._max_entries,
                self._max_entries,
            )
            logs = logs[: self._max_entries]
        logger.debug("[LOGS] Added %s %s", log.request_type, log.path)
        self._logs_notifier.value = logs

    def clear_logs(self) -> None:
        """Drop every entry and notify subscribers with an empty list."""
        logger.debug("[LOGS] Clearing %d entries", len(self._logs_notifier.value))
        self._logs_notifier.value = ()

    def subscribe(self, listener: Callable[[Logs], None]) -> Callable[[], None]:
        """Call `listener` with the full list after every change.

        Returns a function that unsubscribes the listener.
        """
        unsubscribe = self._logs_notifier.add_listener(listener)
        logger.debug(
            "[LOGS] Subscribed %r (%d listeners)",
            listener,
            self._logs_notifier.listener_count,
        )
        return unsubscribe

    def current_logs(self) -> Logs:
        return self._logs_notifier.value

    def export_payloads(self) -> List[Dict[str, Optional[str]]]:
        """Return every entry as a payload dict, newest first."""
        return [log.to_payload() for log in self._logs_notifier.value]

    def __len__(self) -> int:
        return len(self._logs_notifier.value)
