"""
PRISM — Theme Catalog
Curated, ordered lists of theme names. Names missing from the running app are
dropped by the availability filter, so the lists may mention themes that only
some Textual releases ship.
"""

from __future__ import annotations

from dataclasses import dataclass


DARK_THEMES: tuple[str, ...] = (
    "textual-dark",
    "nebula",
    "tokyo-night",
    "dracula",
    "nord",
    "gruvbox",
    "monokai",
    "catppuccin-mocha",
    "catppuccin-macchiato",
    "catppuccin-frappe",
    "rose-pine",
    "rose-pine-moon",
    "solarized-dark",
    "atom-one-dark",
    "flexoki",
    "zenburn",
    "midnight-ember",
    "one-dark-pro",
    "github-dark",
    "everforest-dark",
    "kanagawa",
    "ayu-dark",
    "material-ocean",
    "night-owl",
)

LIGHT_THEMES: tuple[str, ...] = (
    "textual-light",
    "paper",
    "catppuccin-latte",
    "solarized-light",
    "rose-pine-dawn",
    "atom-one-light",
    "github-light",
    "everforest-light",
    "ayu-light",
    "gruvbox-light",
    "tokyo-night-day",
)

OTHER_THEMES: tuple[str, ...] = (
    "textual-ansi",
    "high-contrast",
    "phosphor",
    "amber-crt",
    "sepia",
)


@dataclass(frozen=True)
class Catalog:
    key: str
    label: str
    prompt: str
    themes: tuple[str, ...]


CATALOGS: dict[str, Catalog] = {
    "dark": Catalog("dark", "dark", "Dark theme: ", DARK_THEMES),
    "light": Catalog("light", "light", "Light theme: ", LIGHT_THEMES),
    "other": Catalog("other", "other", "Theme: ", OTHER_THEMES),
}


def get_catalog(key: str) -> Catalog:
    """Look up a catalog by key, raising KeyError with the valid keys listed."""
    try:
        return CATALOGS[key]
    except KeyError:
        raise KeyError(f"Unknown catalog '{key}' (expected one of: {', '.join(CATALOGS)})") from None
