"""Expandable greeting card.

The card describes its content from ``ItemState`` and re-describes it each
time ``item.expanded`` changes; pushing the change to the screen is left to
the ``refresh`` callback supplied by the host.
"""

from __future__ import annotations

from typing import Callable, List

import flet as ft

from codelab.app.state.greeting_state import EXPANDED_TEXT_REPEAT, ItemState, expanded_text
from codelab.app.ui.theme import (
    CARD_COLOR, CARD_TEXT,
    CARD_MARGIN_HORIZONTAL, CARD_MARGIN_VERTICAL, CARD_RADIUS,
    CARD_ROW_PADDING, CARD_TEXT_PADDING,
    EXPAND_ANIMATION_CURVE, EXPAND_ANIMATION_MS,
)

GREETING_PREFIX = "Hello, "
SHOW_MORE = "Show more"
SHOW_LESS = "Show less"


def _text_controls(item: ItemState, repeat: int) -> List[ft.Control]:
    controls: List[ft.Control] = [
        ft.Text(GREETING_PREFIX, color=CARD_TEXT),
        ft.Text(
            item.name,
            theme_style=ft.TextThemeStyle.HEADLINE_MEDIUM,
            weight=ft.FontWeight.W_800,
            color=CARD_TEXT,
        ),
    ]
    if item.is_expanded:
        controls.append(ft.Text(expanded_text(repeat), color=CARD_TEXT))
    return controls


def _expand_icon(expanded: bool) -> str:
    return ft.Icons.EXPAND_LESS if expanded else ft.Icons.EXPAND_MORE


def _expand_label(expanded: bool) -> str:
    return SHOW_LESS if expanded else SHOW_MORE


def build_greeting_card(
    item: ItemState,
    refresh: Callable[[], None],
    repeat: int = EXPANDED_TEXT_REPEAT,
) -> ft.Card:
    """Build the card for one greeting.

    Args:
        item: State of the greeting this card shows
        refresh: Called after the card has re-described itself
        repeat: Repetitions of the expanded text block
    """
    text_column = ft.Column(controls=_text_controls(item, repeat), spacing=2)

    def _on_toggle(e: ft.ControlEvent) -> None:
        item.toggle()

    expand_button = ft.IconButton(
        icon=_expand_icon(item.is_expanded),
        icon_color=CARD_TEXT,
        tooltip=_expand_label(item.is_expanded),
        on_click=_on_toggle,
    )

    def _sync() -> None:
        expanded = item.is_expanded
        text_column.controls = _text_controls(item, repeat)
        expand_button.icon = _expand_icon(expanded)
        expand_button.tooltip = _expand_label(expanded)
        refresh()

    item.expanded.listen(_sync)

    return ft.Card(
        data=item.name,
        margin=ft.Margin.symmetric(vertical=CARD_MARGIN_VERTICAL, horizontal=CARD_MARGIN_HORIZONTAL),
        content=ft.Container(
            bgcolor=CARD_COLOR,
            border_radius=CARD_RADIUS,
            padding=CARD_ROW_PADDING,
            animate_size=ft.Animation(EXPAND_ANIMATION_MS, EXPAND_ANIMATION_CURVE),
            content=ft.Row(
                controls=[
                    ft.Container(content=text_column, padding=CARD_TEXT_PADDING, expand=True),
                    expand_button,
                ],
                vertical_alignment=ft.CrossAxisAlignment.START,
            ),
        ),
    )
