"""Greeting list state: the fixed name list and per-item expansion flags.

Item state lives in an arena keyed by name (names are unique) and owned by
the list, so a card that is rebuilt by the renderer picks up the same
``ItemState`` instead of starting collapsed again.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from fletx.core import RxBool

logger = logging.getLogger(__name__)

DEFAULT_NAME_COUNT = 1000
EXPANDED_TEXT_UNIT = "Composem ipsum color sit, padding theme elit, send do bouncy, "
EXPANDED_TEXT_REPEAT = 4
EXPANDED_TEXT = EXPANDED_TEXT_UNIT * EXPANDED_TEXT_REPEAT


def make_names(n: int = DEFAULT_NAME_COUNT) -> Tuple[str, ...]:
    """Return ``n`` decimal-string identifiers ``"0" .. str(n - 1)`` in order."""
    if n < 0:
        raise ValueError(f"Name count must be non-negative, got {n}")
    return tuple(str(i) for i in range(n))


def expanded_text(repeat: int = EXPANDED_TEXT_REPEAT) -> str:
    """The extended text block shown by an expanded card (same for every item)."""
    return EXPANDED_TEXT_UNIT * repeat


class ItemState:
    """Expand/collapse state of a single greeting card."""

    def __init__(self, name: str, expanded: bool = False) -> None:
        self._name = name
        self.expanded: RxBool = RxBool(expanded)
        self._disposed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_expanded(self) -> bool:
        return self.expanded.value

    @property
    def disposed(self) -> bool:
        return self._disposed

    def toggle(self) -> None:
        """Flip ``expanded``."""
        if self._disposed:
            logger.debug(f"toggle ignored: item '{self._name}' already disposed")
            return
        self.expanded.value = not self.expanded.value
        logger.debug(f"Item '{self._name}' expanded={self.expanded.value}")

    def restore(self, expanded: bool) -> None:
        """Set ``expanded`` from saved state; observers fire only on a change."""
        if self._disposed:
            return
        if self.expanded.value != expanded:
            self.expanded.value = expanded

    def dispose(self) -> None:
        self._disposed = True

    def __repr__(self) -> str:
        return f"ItemState(name={self._name!r}, expanded={self.expanded.value})"


class GreetingsState:
    """Owns the name list and the ``name -> ItemState`` arena.

    Item states are created on first access, which is when the renderer
    first builds the corresponding card.
    """

    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        expanded: Optional[Dict[str, bool]] = None,
    ) -> None:
        """Initialize the list state.

        Args:
            names: Item identifiers; defaults to ``make_names()``
            expanded: Restored expansion flags keyed by name. Unknown names
                are dropped.
        """
        self.names: Tuple[str, ...] = tuple(names) if names is not None else make_names()
        if len(set(self.names)) != len(self.names):
            raise ValueError("Greeting names must be unique")
        self._index = {name: i for i, name in enumerate(self.names)}
        self._items: Dict[str, ItemState] = {}

        if expanded:
            self.restore(expanded)

    def __len__(self) -> int:
        return len(self.names)

    def item(self, name: str) -> ItemState:
        """Return the stable state for ``name``, creating it if needed."""
        if name not in self._index:
            raise KeyError(name)
        state = self._items.get(name)
        if state is None:
            state = ItemState(name)
            self._items[name] = state
        return state

    def item_at(self, index: int) -> ItemState:
        return self.item(self.names[index])

    def items(self) -> List[ItemState]:
        """States for every name, in list order."""
        return [self.item(name) for name in self.names]

    def expanded_names(self) -> List[str]:
        return [
            name for name in self.names
            if name in self._items and self._items[name].is_expanded
        ]

    def snapshot(self) -> Dict[str, bool]:
        """Expansion flags of every item state created so far."""
        return {name: state.is_expanded for name, state in self._items.items()}

    def restore(self, expanded: Dict[str, bool]) -> None:
        """Apply saved expansion flags to the item states in place.

        Existing items missing from ``expanded`` collapse. Unknown names are
        dropped.
        """
        for name, state in self._items.items():
            if name not in expanded:
                state.restore(False)
        for name, value in expanded.items():
            if name not in self._index:
                logger.warning(f"Dropping saved state for unknown item '{name}'")
                continue
            self.item(name).restore(bool(value))

    def dispose(self) -> None:
        for state in self._items.values():
            state.dispose()
