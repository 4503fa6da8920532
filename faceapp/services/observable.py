"""
Published state for the managers.

Each manager holds one immutable state snapshot (a frozen dataclass with at
least `loading` and `error`). Changes replace the snapshot and are pushed to
subscribers synchronously, so a subscriber always sees the new state before
the operation that caused it returns.
"""

import itertools
import logging
from contextlib import contextmanager
from dataclasses import replace

logger = logging.getLogger(__name__)


class ObservableService:
    def __init__(self, initial_state):
        self._state = initial_state
        self._subscribers = []
        self._busy_depth = 0
        self._fetch_sequence = itertools.count(1)
        self._latest_fetch = {}

    @property
    def state(self):
        return self._state

    @property
    def loading(self):
        return self._state.loading

    @property
    def error(self):
        return self._state.error

    def subscribe(self, callback):
        """Register callback(state); returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _update(self, **changes):
        self._state = replace(self._state, **changes)
        for callback in list(self._subscribers):
            callback(self._state)

    @contextmanager
    def _busy(self):
        """
        loading is True for the whole block, error is reset on entry.
        Nested blocks keep loading set until the outermost one exits.
        """
        self._busy_depth += 1
        self._update(loading=True, error=None)
        try:
            yield
        finally:
            self._busy_depth -= 1
            if self._busy_depth == 0:
                self._update(loading=False)

    def _begin_fetch(self, channel):
        ticket = next(self._fetch_sequence)
        self._latest_fetch[channel] = ticket
        return ticket

    def _is_latest_fetch(self, channel, ticket):
        if self._latest_fetch.get(channel) != ticket:
            logger.debug("Discarding stale %s response (request %s)", channel, ticket)
            return False
        return True
