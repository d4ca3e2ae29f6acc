"""Change notification with explicit subscribe, batching and disposal."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

from dragboard.model.outcome import DisposedError

Listener = Callable[[object], None]


class ChangeNotifier:
    """Owns a listener set and fires it after each applied change.

    Listeners are called with the notifier itself. Inside ``batch()``
    notifications are deferred and collapsed into one at exit.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._batch_depth = 0
        self._pending = False
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def watch(self, callback: Listener) -> Callable[[], None]:
        """Register a listener. Returns an unwatch callable."""
        self._check_alive()
        self._listeners.append(callback)

        def unwatch() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unwatch

    def notify_listeners(self) -> None:
        """Fire every listener, or mark pending while batching."""
        if self._batch_depth:
            self._pending = True
            return
        for callback in list(self._listeners):
            callback(self)

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Collapse notifications raised inside the block into one."""
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if not self._batch_depth and self._pending:
                self._pending = False
                self.notify_listeners()

    def dispose(self) -> None:
        """Drop all listeners. The notifier must not be used afterwards."""
        self._listeners.clear()
        self._pending = False
        self._disposed = True

    def _check_alive(self) -> None:
        if self._disposed:
            raise DisposedError(f"{type(self).__name__} used after dispose()")
