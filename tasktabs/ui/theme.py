"""Color themes for TaskTabs.

Two palettes, a warm light one built around #FDD18F and a soft dark one,
each registered with Textual as a named theme. Components style themselves
with Textual's theme variables ($primary, $surface, $foreground, ...), so
switching the app theme recolors everything without touching widget CSS.

Usage:

    from tasktabs.ui.theme import get_theme

    app.register_theme(get_theme("light"))
    app.theme = theme_name("light")
"""

from typing import Dict

from textual.theme import Theme

from tasktabs.exceptions import ConfigError


# ============================================================================
# LIGHT PALETTE
# ============================================================================

PRIMARY_LIGHT = "#FDD18F"      # Primary accent (warm sand)
SECONDARY_LIGHT = "#F8B252"    # Secondary accent / buttons
BACKGROUND_LIGHT = "#FFF4E1"   # Screen background
SURFACE_LIGHT = "#FFFFFF"      # Panels and dialogs
ON_SURFACE_LIGHT = "#3E2723"   # Dark text on light surfaces


# ============================================================================
# DARK PALETTE
# ============================================================================

PRIMARY_DARK = "#2A2A2A"            # Screen background (dark gray, not black)
SURFACE_DARK = "#424242"            # Panels and dialogs
ON_PRIMARY_DARK = "#FFFFFF"         # Title text
ON_SURFACE_DARK = "#E0E0E0"         # Body text on dark surfaces
BUTTON_BACKGROUND_DARK = "#3A3A3A"  # Button background
BUTTON_TEXT_DARK = "#FFFFFF"        # Button text


# ============================================================================
# SHARED STATUS COLORS
# ============================================================================

ERROR_COLOR = "#E57373"    # Purge / destructive actions
WARNING_COLOR = "#F8B252"  # Validation messages
SUCCESS_COLOR = "#81C784"  # Restore / save actions


THEME_PREFIX = "tasktabs"

_THEMES: Dict[str, Theme] = {
    "light": Theme(
        name=f"{THEME_PREFIX}-light",
        primary=SECONDARY_LIGHT,
        secondary=PRIMARY_LIGHT,
        accent=SECONDARY_LIGHT,
        foreground=ON_SURFACE_LIGHT,
        background=BACKGROUND_LIGHT,
        surface=SURFACE_LIGHT,
        panel=PRIMARY_LIGHT,
        error=ERROR_COLOR,
        warning=WARNING_COLOR,
        success=SUCCESS_COLOR,
        dark=False,
    ),
    "dark": Theme(
        name=f"{THEME_PREFIX}-dark",
        # Accent shared with the light palette; PRIMARY_DARK is the background.
        primary=PRIMARY_LIGHT,
        secondary=BUTTON_BACKGROUND_DARK,
        accent=PRIMARY_LIGHT,
        foreground=ON_SURFACE_DARK,
        background=PRIMARY_DARK,
        surface=SURFACE_DARK,
        panel=BUTTON_BACKGROUND_DARK,
        error=ERROR_COLOR,
        warning=WARNING_COLOR,
        success=SUCCESS_COLOR,
        dark=True,
    ),
}


def theme_name(name: str) -> str:
    """Map a config theme name ("dark"/"light") to its registered Textual name."""
    return get_theme(name).name


def get_theme(name: str) -> Theme:
    """Get the Textual theme for a config theme name.

    Args:
        name: "dark" or "light" (case-insensitive)

    Returns:
        Textual Theme ready for App.register_theme()

    Raises:
        ConfigError: If the name is not a known theme
    """
    try:
        return _THEMES[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown theme '{name}'. Expected one of: {', '.join(sorted(_THEMES))}"
        ) from None


def all_themes() -> list:
    """Return every TaskTabs theme, for registering them all at startup."""
    return list(_THEMES.values())
