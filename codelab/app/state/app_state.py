"""Application Shell State Management.

Holds the single reactive flag that selects between the onboarding screen
and the greetings list. The flag only ever moves one way: once the user
continues past onboarding there is no path back for the rest of the session.
"""

from __future__ import annotations

import logging

from fletx.core import RxBool

logger = logging.getLogger(__name__)


class AppState:
    """Reactive State for the Application Shell.

    Two-state, one-directional machine: Onboarding (initial) -> List
    (terminal). UI components observe ``onboarding_visible`` through
    ``listen`` and re-render when it changes.
    """

    def __init__(self, onboarding_visible: bool = True) -> None:
        """Initialize application state.

        Args:
            onboarding_visible: Starting screen. Only a restored session
                passes ``False`` here.
        """
        self.onboarding_visible: RxBool = RxBool(onboarding_visible)
        self._disposed = False

    @property
    def show_onboarding(self) -> bool:
        return self.onboarding_visible.value

    @property
    def disposed(self) -> bool:
        return self._disposed

    # --- Public Actions ---

    def on_continue(self) -> None:
        """Dismiss onboarding and show the greetings list.

        Repeated calls are no-ops and do not notify observers.
        """
        if self._disposed:
            logger.debug("on_continue ignored: AppState already disposed")
            return
        if not self.onboarding_visible.value:
            return
        self.onboarding_visible.value = False
        logger.info("Onboarding dismissed, showing greetings")

    def dispose(self) -> None:
        """Mark this state as destroyed; later actions are ignored."""
        self._disposed = True
