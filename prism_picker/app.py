"""
PRISM — Main Application
Theme picker TUI with live preview.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from rich.markup import escape
from textual.app import App, ComposeResult, SystemCommand
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Static

from .backend import TextualThemeBackend
from .catalog import CATALOGS, get_catalog
from .screens.picker import ScreenChooser
from .selector import Session, ThemeSelector
from .state import ActiveThemeState
from .store import ConfigStore
from .themes import BASE_THEME, BUNDLED_THEMES

logger = logging.getLogger(__name__)


class PrismApp(App):
    """PRISM — pick a theme, see it before you keep it."""

    TITLE = "PRISM"
    SUB_TITLE = "Theme Picker"

    CSS = """
    #sidebar {
        width: 30;
        padding: 1 2;
        border-right: solid $primary;
    }
    #main-content {
        padding: 1 2;
    }
    .nav-item {
        width: 100%;
        margin-bottom: 1;
    }
    .swatches Button {
        margin-right: 1;
    }
    """

    BINDINGS = [
        ("d", "select_dark", "Dark"),
        ("l", "select_light", "Light"),
        ("o", "select_other", "Other"),
        ("s", "select_default", "Select"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, store: Optional[ConfigStore] = None, start_catalog: Optional[str] = None) -> None:
        super().__init__()
        self.store = store or ConfigStore()
        self.start_catalog = start_catalog
        for theme in BUNDLED_THEMES:
            self.register_theme(theme)

        cfg = self.store.load()
        base_theme = cfg.base_theme if cfg.base_theme in self.available_themes else BASE_THEME
        self.theme_backend = TextualThemeBackend(self, base_theme)
        self.theme_state = ActiveThemeState(
            self.theme_backend,
            notify=self._notify,
        )
        self.selector = ThemeSelector(
            self.theme_state,
            ScreenChooser(self),
            on_commit=self._on_commit,
        )

    def _notify(self, message: str, severity: str) -> None:
        self.notify(escape(message), severity=severity)

    def _on_commit(self, theme: str) -> None:
        try:
            self.store.save_theme(theme)
        except OSError as exc:
            logger.warning("Could not save theme %s to %s: %s", theme, self.store.config_file, exc)
            self._notify(f"Theme {theme} applied but not saved: {exc}", "warning")
        self._refresh_status()

    # ── Compose ──────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal(id="app-grid"):
            with Vertical(id="sidebar"):
                yield Static("[b]◆ PRISM ◆[/b]\n", id="sidebar-logo")
                for key, catalog in CATALOGS.items():
                    yield Button(
                        f"{catalog.label.title()} themes",
                        id=f"nav-{key}",
                        classes="nav-item",
                    )
                yield Static("", id="sidebar-status")

            with Vertical(id="main-content"):
                yield Static("[b]Preview[/b]\n", id="preview-title")
                yield Static(
                    "The quick brown fox jumps over the lazy dog.\n"
                    "[dim]Muted text[/]  [green]success[/]  "
                    "[yellow]warning[/]  [red]error[/]\n"
                )
                yield Horizontal(
                    Button("Default"),
                    Button("Primary", variant="primary"),
                    Button("Success", variant="success"),
                    Button("Warning", variant="warning"),
                    Button("Error", variant="error"),
                    classes="swatches",
                )
                yield Input(placeholder="Sample input")

        yield Footer()

    # ── Lifecycle ─────────────────────────────────────────────

    def on_mount(self) -> None:
        cfg = self.store.load()
        if cfg.theme and self.theme_state.is_loadable(cfg.theme):
            self.theme_state.apply(cfg.theme)
        else:
            if cfg.theme:
                logger.warning("Saved theme %s is not available, using %s", cfg.theme, self.theme_backend.base_theme)
            self.theme_backend.show_base()
        self._status = self.query_one("#sidebar-status", Static)
        self.theme_changed_signal.subscribe(self, self._on_theme_changed)
        self._refresh_status()

        if self.start_catalog:
            self.run_catalog(self.start_catalog)

    def _on_theme_changed(self, theme) -> None:
        if self.theme_backend.is_external_change():
            name = self.theme
            self.theme_backend.rendered = name
            self.theme_state.adopt(None if name == self.theme_backend.base_theme else name)
        self.call_after_refresh(self._refresh_status)

    def _refresh_status(self) -> None:
        active = self.theme_state.current or "(none)"
        committed = self.store.load().theme or "(none)"
        self._status.update(f"\n[dim]Active:[/] {active}\n[dim]Saved:[/]  {committed}")

    # ── Selection ─────────────────────────────────────────────

    def run_catalog(self, key: str) -> Optional[Session]:
        return self.selector.run_catalog(get_catalog(key))

    def action_select_dark(self) -> None:
        self.selector.select_dark_theme()

    def action_select_light(self) -> None:
        self.selector.select_light_theme()

    def action_select_other(self) -> None:
        self.selector.select_other_theme()

    def action_select_default(self) -> None:
        self.run_catalog(self.store.load().default_catalog)

    def action_change_theme(self) -> None:
        # Textual's own "Theme" command; route it through the selector
        self.action_select_default()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        bid = event.button.id or ""
        if bid.startswith("nav-"):
            self.run_catalog(bid.removeprefix("nav-"))

    def get_system_commands(self, screen) -> Iterable[SystemCommand]:
        yield from super().get_system_commands(screen)

        yield SystemCommand("Select Dark Theme", "Browse dark themes with live preview", self.action_select_dark)
        yield SystemCommand("Select Light Theme", "Browse light themes with live preview", self.action_select_light)
        yield SystemCommand("Select Other Theme", "Browse the remaining themes with live preview", self.action_select_other)
