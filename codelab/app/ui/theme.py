"""
Codelab Theme - Centralized color palette and Material 3 themes.

Color Philosophy:
- One seed colour for both schemes; Material 3 derives the dark tones
- Cards use the primary color with on-primary text
"""

import flet as ft

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
PURPLE_40 = "#6650A4"          # Light scheme primary
PURPLE_80 = "#D0BCFF"          # Dark scheme primary

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
CARD_COLOR = ft.Colors.PRIMARY          # Greeting card container
CARD_TEXT = ft.Colors.ON_PRIMARY        # Text and icons on a card
SURFACE_COLOR = ft.Colors.SURFACE       # Screen background

# =============================================================================
# SPACING (logical pixels)
# =============================================================================
LIST_PADDING_VERTICAL = 4
CARD_MARGIN_VERTICAL = 4
CARD_MARGIN_HORIZONTAL = 8
CARD_ROW_PADDING = 12
CARD_TEXT_PADDING = 12
CARD_RADIUS = 12
ONBOARDING_BUTTON_PADDING_VERTICAL = 24

# Size animation standing in for a medium-bouncy, low-stiffness spring
EXPAND_ANIMATION_MS = 450
EXPAND_ANIMATION_CURVE = ft.AnimationCurve.EASE_OUT_BACK

THEME_MODES = {
    "system": ft.ThemeMode.SYSTEM,
    "light": ft.ThemeMode.LIGHT,
    "dark": ft.ThemeMode.DARK,
}


def light_theme(seed: str = PURPLE_40) -> ft.Theme:
    return ft.Theme(color_scheme_seed=seed, use_material3=True)


def dark_theme(seed: str = PURPLE_80) -> ft.Theme:
    return ft.Theme(color_scheme_seed=seed, use_material3=True)


def get_theme_mode(name: str) -> ft.ThemeMode:
    """Map a configured theme mode name to Flet's enum (unknown -> system)."""
    return THEME_MODES.get(name.lower(), ft.ThemeMode.SYSTEM)


def apply_theme(page: ft.Page, primary_color: str = PURPLE_40, theme_mode: str = "system") -> None:
    """Install the light/dark themes on the page."""
    page.theme = light_theme(primary_color)
    page.dark_theme = dark_theme(primary_color)
    page.theme_mode = get_theme_mode(theme_mode)
    page.padding = 0
