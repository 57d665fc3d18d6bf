"""
Design tokens: colors, spacing, radius. One TokenSet per theme.
"""
from __future__ import annotations


class TokenSet:
    """Design tokens for one theme."""

    __slots__ = (
        "background_main", "surface", "surface_hover",
        "primary", "text_primary", "text_secondary", "border",
        "space_sm", "space_md", "radius_sm", "radius_md",
    )

    def __init__(
        self,
        *,
        background_main: str = "#242424",
        surface: str = "#303030",
        surface_hover: str = "#3a3a3a",
        primary: str = "#3584e4",
        text_primary: str = "#ffffff",
        text_secondary: str = "#9a9996",
        border: str = "#454545",
        space_sm: int = 6,
        space_md: int = 12,
        radius_sm: int = 6,
        radius_md: int = 12,
    ) -> None:
        self.background_main = background_main
        self.surface = surface
        self.surface_hover = surface_hover
        self.primary = primary
        self.text_primary = text_primary
        self.text_secondary = text_secondary
        self.border = border
        self.space_sm = space_sm
        self.space_md = space_md
        self.radius_sm = radius_sm
        self.radius_md = radius_md


# Predefined palettes
DARK = TokenSet()

LIGHT = TokenSet(
    background_main="#fafafa",
    surface="#ffffff",
    surface_hover="#ebebeb",
    primary="#1c71d8",
    text_primary="#1e1e1e",
    text_secondary="#5e5c64",
    border="#d8d8d8",
)
