"""Onboarding screen shown before the greetings list."""

from __future__ import annotations

from typing import Callable

import flet as ft

from codelab.app.ui.theme import ONBOARDING_BUTTON_PADDING_VERTICAL

WELCOME_TEXT = "Welcome to the Basic Codelab!"
CONTINUE_TEXT = "Continue"


def build_onboarding(on_continue: Callable[[], None]) -> ft.Column:
    """Centered welcome text with a button that dismisses onboarding.

    Args:
        on_continue: Zero-argument callback invoked when the button is clicked
    """

    def _on_click(e: ft.ControlEvent) -> None:
        on_continue()

    continue_button = ft.FilledButton(
        content=ft.Text(CONTINUE_TEXT),
        on_click=_on_click,
    )

    return ft.Column(
        controls=[
            ft.Text(WELCOME_TEXT),
            ft.Container(
                content=continue_button,
                padding=ft.Padding.symmetric(vertical=ONBOARDING_BUTTON_PADDING_VERTICAL),
            ),
        ],
        alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        expand=True,
    )
