"""Scrollable list of greeting cards."""

from __future__ import annotations

from typing import Callable

import flet as ft

from codelab.app.state.greeting_state import EXPANDED_TEXT_REPEAT, GreetingsState
from codelab.app.ui.components.greeting_card import build_greeting_card
from codelab.app.ui.theme import LIST_PADDING_VERTICAL


def build_greetings(
    greetings: GreetingsState,
    refresh: Callable[[], None],
    repeat: int = EXPANDED_TEXT_REPEAT,
) -> ft.ListView:
    """One card per name, in list order.

    ``ft.ListView`` only lays out the rows in view, so building all cards up
    front stays cheap even for the full list.
    """
    return ft.ListView(
        controls=[build_greeting_card(item, refresh, repeat) for item in greetings.items()],
        padding=ft.Padding.symmetric(vertical=LIST_PADDING_VERTICAL),
        expand=True,
    )
