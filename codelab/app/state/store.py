"""Per-Page State Store.

Holds all reactive state behind one rendered screen, and the save/restore
entry points used when the host recreates the view. Each Flet page gets its
own store; nothing in here is shared between pages.
"""

from __future__ import annotations

import logging
from typing import Optional

from .app_state import AppState
from .greeting_state import GreetingsState, make_names
from .saved_state import StateBundle
from codelab.shared.core.configuration import SystemConfig

logger = logging.getLogger(__name__)


class Store:
    """State store for one rendered codelab screen.

    Usage:
        # When a page is opened
        store = Store(config)
        view = build_shell(page, store)

        # On a configuration change
        store = store.recreate()
    """

    def __init__(self, config: Optional[SystemConfig] = None) -> None:
        """Initialize store.

        Args:
            config: System configuration; Pydantic defaults when omitted
        """
        self.config = config or SystemConfig()
        self.app = AppState()
        self._greetings: Optional[GreetingsState] = None

    @property
    def greetings(self) -> GreetingsState:
        """The greetings list state, created when first needed.

        Raises:
            RuntimeError: If onboarding is still shown
        """
        if self.app.show_onboarding:
            raise RuntimeError("Greetings are not available while onboarding is shown")
        if self._greetings is None:
            self._greetings = GreetingsState(make_names(self.config.greetings.count))
            logger.debug(f"Created greetings state with {len(self._greetings)} items")
        return self._greetings

    def save_state(self) -> StateBundle:
        """Snapshot the state that must survive a view recreation."""
        expanded = self._greetings.snapshot() if self._greetings is not None else {}
        return StateBundle(onboarding_visible=self.app.show_onboarding, expanded=expanded)

    def restore_state(self, bundle: StateBundle) -> None:
        """Apply a previously saved snapshot.

        Item states that already exist are updated in place, so cards
        rendered from them keep working. Onboarding is never brought back:
        a bundle saved before the user continued leaves an already-dismissed
        shell untouched.
        """
        if not bundle.onboarding_visible:
            self.app.on_continue()
        if self.app.show_onboarding:
            return
        self.greetings.restore(bundle.expanded)
        logger.info(f"Restored state: {len(bundle.expanded)} item state(s)")

    def recreate(self, config: Optional[SystemConfig] = None) -> 'Store':
        """Tear this store down and return a fresh one carrying its state.

        This is what a configuration change (e.g. a brightness switch) does
        to the screen: the old instances are destroyed and new ones are
        restored from the saved bundle.
        """
        bundle = self.save_state()
        self.dispose()
        store = Store(config or self.config)
        store.restore_state(bundle)
        return store

    def dispose(self) -> None:
        self.app.dispose()
        if self._greetings is not None:
            self._greetings.dispose()
