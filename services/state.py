# services/state.py
from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import replace
from typing import Callable, ClassVar, Deque, Iterable, List, Optional

from models.dessert import Dessert, DessertUiState
from services.catalog import Catalog, default_catalog, select_dessert, validate_catalog

logger = logging.getLogger(__name__)

Observer = Callable[[DessertUiState], None]


class ClickerState:
    """
    Holder of the current DessertUiState and its observers.

    The state value is immutable; each click builds a new one and publishes it
    to observers synchronously, in registration order. Use
    ClickerState.instance() for the shared, app-wide holder.
    """

    _singleton: ClassVar[Optional["ClickerState"]] = None

    def __init__(self, catalog: Optional[Iterable[Dessert]] = None) -> None:
        self.catalog: Catalog = validate_catalog(default_catalog() if catalog is None else catalog)
        self._state = DessertUiState(
            revenue=0,
            desserts_sold=0,
            current_dessert=self.catalog[0],
        )
        self._observers: List[Observer] = []
        self._lock = threading.RLock()
        self._pending: Deque[DessertUiState] = deque()
        self._notifying = False

    # --- Singleton plumbing ---
    @classmethod
    def instance(cls, catalog: Optional[Iterable[Dessert]] = None) -> "ClickerState":
        """
        Return the single shared ClickerState, creating it if needed.

        catalog is only used when the shared holder is first created.
        """
        if cls._singleton is None:
            cls._singleton = cls(catalog)
        return cls._singleton

    # --- Observers ---
    def subscribe(self, observer: Observer) -> None:
        """Register a callback invoked with each new state."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Remove a callback; no error if it was never registered."""
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                pass

    def _notify(self, state: DessertUiState) -> None:
        """Invoke observers in order; a failing observer doesn't stop the rest."""
        for cb in list(self._observers):
            try:
                cb(state)
            except Exception:
                logger.exception("State observer %r failed", cb)

    # --- Queries ---
    def snapshot(self) -> DessertUiState:
        """Return the current state."""
        return self._state

    # --- Mutations ---
    def on_dessert_clicked(self) -> DessertUiState:
        """
        Sell the dessert on screen.

        Revenue grows by the price of the dessert shown before the click, the
        sold count grows by one, and the dessert is re-selected for the new
        count. Returns the published state.
        """
        with self._lock:
            current = self._state
            desserts_sold = current.desserts_sold + 1
            new_state = replace(
                current,
                revenue=current.revenue + current.current_dessert.price,
                desserts_sold=desserts_sold,
                current_dessert=select_dessert(self.catalog, desserts_sold),
            )
            self._state = new_state
            if new_state.current_dessert != current.current_dessert:
                logger.debug(
                    "Now showing %s after %d sold",
                    new_state.current_dessert.name, desserts_sold,
                )
            self._pending.append(new_state)
            if not self._notifying:
                self._drain()
        return new_state

    def _drain(self) -> None:
        """
        Deliver queued states one round at a time.

        A click made from inside an observer only queues its state, so every
        observer sees states in order and ends on the current one.
        """
        self._notifying = True
        try:
            while self._pending:
                self._notify(self._pending.popleft())
        finally:
            self._notifying = False
