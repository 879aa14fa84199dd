from __future__ import annotations

import logging
from typing import Callable

import flet as ft

from codelab.app.state import Store
from codelab.app.ui.components.greetings import build_greetings
from codelab.app.ui.components.onboarding import build_onboarding
from codelab.app.ui.theme import SURFACE_COLOR

logger = logging.getLogger(__name__)


def _screen_content(store: Store, refresh: Callable[[], None]) -> ft.Control:
    if store.app.show_onboarding:
        return build_onboarding(store.app.on_continue)
    return build_greetings(
        store.greetings,
        refresh,
        repeat=store.config.greetings.expanded_text_repeat,
    )


def build_surface(store: Store, refresh: Callable[[], None]) -> ft.Container:
    """Container showing onboarding or the greetings list.

    The content is swapped when ``store.app.onboarding_visible`` changes,
    then ``refresh`` is called so the host can redraw.
    """
    surface = ft.Container(
        content=_screen_content(store, refresh),
        bgcolor=SURFACE_COLOR,
        expand=True,
    )

    def _sync_screen() -> None:
        surface.content = _screen_content(store, refresh)
        logger.debug(f"Screen content swapped (onboarding={store.app.show_onboarding})")
        refresh()

    store.app.onboarding_visible.listen(_sync_screen)
    return surface


def build_shell(page: ft.Page, store: Store) -> ft.View:
    return ft.View(
        route="/",
        padding=0,
        controls=[build_surface(store, page.update)],
    )
