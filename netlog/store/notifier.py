"""ValueNotifier: a single observable value with synchronous listeners.

Assigning `notifier.value` stores the new value and immediately calls
every registered listener with it, in registration order, on the calling
thread. Listeners are snapshotted before the fan-out, so a listener may
unsubscribe itself (or others) while a publish is in progress.
"""

import logging
from typing import Callable, Generic, List, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class _Registration(Generic[T]):
    """One add_listener() call. Identity is what gets removed."""

    __slots__ = ("callback", "active")

    def __init__(self, callback: "Listener[T]") -> None:
        self.callback = callback
        self.active = True


class ValueNotifier(Generic[T]):
    """Holds one value and publishes every assignment to its listeners.

    Parameters
    ----------
    value:
        Initial value. Not published.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._registrations: List[_Registration[T]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        # Every assignment is a publish, even if the new value compares equal.
        self._value = new_value
        self.notify_listeners()

    @property
    def listener_count(self) -> int:
        return len(self._registrations)

    @property
    def has_listeners(self) -> bool:
        return bool(self._registrations)

    def add_listener(self, callback: "Listener[T]") -> Callable[[], None]:
        """Register `callback` and return a function that removes it again.

        The returned function removes exactly this registration and is
        safe to call more than once.
        """
        registration = _Registration(callback)
        self._registrations.append(registration)

        def remove() -> None:
            self._remove_registration(registration)

        return remove

    def remove_listener(self, callback: "Listener[T]") -> None:
        """Remove the first registration of `callback` (no-op if unknown)."""
        for registration in self._registrations:
            if registration.callback == callback:
                self._remove_registration(registration)
                return

    def _remove_registration(self, registration: "_Registration[T]") -> None:
        if not registration.active:
            return
        registration.active = False
        self._registrations.remove(registration)

    def notify_listeners(self) -> None:
        """Call every current listener with the current value.

        A listener that raises is logged and the remaining listeners are
        still called.
        """
        value = self._value
        for registration in list(self._registrations):
            # Removed by an earlier listener during this publish.
            if not registration.active:
                continue
            try:
                registration.callback(value)
            except Exception:
                logger.exception(
                    "[NOTIFY] Listener %r raised while handling a publish",
                    registration.callback,
                )
