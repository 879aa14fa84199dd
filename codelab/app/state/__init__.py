"""FletXr Reactive State Management for the codelab screen.

Architecture:
- AppState: onboarding/list screen selector
- GreetingsState / ItemState: name list and per-card expansion flags
- StateBundle: saved instance state for view recreation
- Store: all state behind one page, with save/restore
"""

from .app_state import AppState
from .greeting_state import GreetingsState, ItemState, make_names
from .saved_state import StateBundle
from .store import Store

__all__ = ["AppState", "GreetingsState", "ItemState", "StateBundle", "Store", "make_names"]
