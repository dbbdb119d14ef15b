"""
PRISM — Theme Picker Screen
Searchable list with live preview. The input keeps focus; arrow keys move the
highlight and every move is reported straight to the selector.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.fuzzy import Matcher
from textual.screen import ModalScreen
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from ..selector import ChoiceRequest


class ThemePickerScreen(ModalScreen[Optional[str]]):
    """Pick one of `request.candidates`; dismisses with the name or None.

    The default is offered as the initial highlight (marked with a dot) and as
    the input placeholder rather than as typed text, so the full list stays
    visible and Enter on an untouched input picks the default.
    """

    DEFAULT_CSS = """
    ThemePickerScreen {
        align: center top;
    }
    #picker-dialog {
        width: 60;
        max-height: 80%;
        margin-top: 2;
        padding: 1 2;
        border: round $primary;
        background: $surface;
    }
    #picker-prompt {
        color: $text-muted;
    }
    #picker-options {
        height: auto;
        max-height: 20;
    }
    #picker-status {
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("down", "cursor_down", "Next"),
        ("up", "cursor_up", "Previous"),
        ("pagedown", "page_down", "Page down"),
        ("pageup", "page_up", "Page up"),
    ]

    def __init__(self, request: ChoiceRequest, on_highlight: Callable[[Optional[str]], None]) -> None:
        super().__init__()
        self.request = request
        self._on_highlight = on_highlight
        self._visible: list[str] = list(request.candidates)

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-dialog"):
            yield Static(self.request.prompt.strip(), id="picker-prompt")
            yield Input(placeholder=f"default: {self.request.default}", id="picker-input")
            yield OptionList(id="picker-options")
            yield Static("", id="picker-status")

    def on_mount(self) -> None:
        options = self.query_one("#picker-options", OptionList)
        options.can_focus = False
        self._populate(self.request.candidates)
        if self.request.default in self._visible:
            options.highlighted = self._visible.index(self.request.default)
        self._preview()
        self.query_one("#picker-input", Input).focus()

    # ── Filtering ────────────────────────────────────────────

    def _populate(self, names: list[str]) -> None:
        options = self.query_one("#picker-options", OptionList)
        self._visible = list(names)
        options.clear_options()
        options.add_options([Option(self._label(name)) for name in names])
        options.highlighted = 0 if names else None
        self.query_one("#picker-status", Static).update(
            f"{len(names)}/{len(self.request.candidates)} themes"
        )

    def _label(self, name: str) -> Text:
        if name == self.request.default:
            return Text.assemble(("● ", "bold"), (name, "bold"))
        return Text(f"  {name}")

    def _filter(self, query: str) -> list[str]:
        query = query.strip()
        if not query:
            return list(self.request.candidates)
        matcher = Matcher(query)
        return [name for name in self.request.candidates if matcher.match(name) > 0]

    def on_input_changed(self, event: Input.Changed) -> None:
        names = self._filter(event.value)
        if names == self._visible:
            return
        self._populate(names)
        self._preview()

    # ── Highlight ────────────────────────────────────────────

    def highlighted_name(self) -> Optional[str]:
        index = self.query_one("#picker-options", OptionList).highlighted
        if index is None or index >= len(self._visible):
            return None
        return self._visible[index]

    def _preview(self) -> None:
        self._on_highlight(self.highlighted_name())

    def _move(self, action: str) -> None:
        options = self.query_one("#picker-options", OptionList)
        before = options.highlighted
        getattr(options, f"action_{action}")()
        if options.highlighted != before:
            self._preview()

    def action_cursor_down(self) -> None:
        self._move("cursor_down")

    def action_cursor_up(self) -> None:
        self._move("cursor_up")

    def action_page_down(self) -> None:
        self._move("page_down")

    def action_page_up(self) -> None:
        self._move("page_up")

    # ── Commit / cancel ──────────────────────────────────────

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        name = self.highlighted_name()
        if name is not None:
            self.dismiss(name)
        elif self.request.require_match:
            self.app.bell()
        else:
            self.dismiss(event.value.strip() or None)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if 0 <= event.option_index < len(self._visible):
            self.dismiss(self._visible[event.option_index])

    def action_cancel(self) -> None:
        self.dismiss(None)


class ScreenChooser:
    """Chooser that pushes a ThemePickerScreen onto a running app."""

    def __init__(self, app: App) -> None:
        self.app = app

    def choose(
        self,
        request: ChoiceRequest,
        on_highlight: Callable[[Optional[str]], None],
        on_done: Callable[[Optional[str]], None],
    ) -> None:
        self.app.push_screen(ThemePickerScreen(request, on_highlight), callback=on_done)
