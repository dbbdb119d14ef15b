"""
PRISM — Textual Backend
Renders ActiveThemeState through a Textual App's `theme` reactive.
"""

from __future__ import annotations

from typing import Optional

from textual.app import App

from .themes import BASE_THEME


class TextualThemeBackend:
    """ThemeBackend over App.available_themes / App.theme.

    With no theme active the app falls back to `base_theme`. `rendered` is the
    last theme this backend put on screen, so a different `App.theme` means
    something else wrote it.
    """

    def __init__(self, app: App, base_theme: str = BASE_THEME) -> None:
        self.app = app
        self.base_theme = base_theme
        self.rendered: Optional[str] = None

    def is_installed(self, theme: str) -> bool:
        return theme in self.app.available_themes

    def activate(self, theme: str) -> None:
        # Textual validates the name and raises for unknown themes
        self._render(theme)

    def deactivate(self, theme: str) -> None:
        if self.app.theme == theme and theme != self.base_theme:
            self._render(self.base_theme)

    def show_base(self) -> None:
        self._render(self.base_theme)

    def is_external_change(self) -> bool:
        return self.app.theme != self.rendered

    def _render(self, theme: str) -> None:
        previous = self.rendered
        self.rendered = theme
        try:
            self.app.theme = theme
        except Exception:
            self.rendered = previous
            raise
