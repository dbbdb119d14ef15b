from __future__ import annotations

from typing import Callable, Optional

import pytest

from prism_picker.selector import ChoiceRequest
from prism_picker.state import ActiveThemeState


class FakeBackend:
    """In-memory renderer; themes in `broken` raise on activation."""

    def __init__(self, installed, broken=()):
        self.installed = set(installed)
        self.broken = set(broken)
        self.rendered: Optional[str] = None
        self.calls: list[tuple[str, str]] = []

    def is_installed(self, theme: str) -> bool:
        return theme in self.installed

    def activate(self, theme: str) -> None:
        self.calls.append(("activate", theme))
        if theme in self.broken:
            raise ValueError("invalid color '#zzzzzz'")
        self.rendered = theme

    def deactivate(self, theme: str) -> None:
        self.calls.append(("deactivate", theme))
        self.rendered = None

    @property
    def activations(self) -> list[str]:
        return [theme for op, theme in self.calls if op == "activate"]


class ScriptedChooser:
    """Replays ("highlight", name) / ("done", name) events synchronously."""

    def __init__(self, events):
        self.events = list(events)
        self.requests: list[ChoiceRequest] = []

    def choose(
        self,
        request: ChoiceRequest,
        on_highlight: Callable[[Optional[str]], None],
        on_done: Callable[[Optional[str]], None],
    ) -> None:
        self.requests.append(request)
        for kind, name in self.events:
            if kind == "highlight":
                on_highlight(name)
            else:
                on_done(name)


class NoticeLog:
    def __init__(self):
        self.items: list[tuple[str, str]] = []

    def __call__(self, message: str, severity: str) -> None:
        self.items.append((message, severity))


@pytest.fixture
def notices() -> NoticeLog:
    return NoticeLog()


@pytest.fixture
def make_state(notices):
    def _make(installed, broken=(), active: Optional[str] = None) -> ActiveThemeState:
        state = ActiveThemeState(FakeBackend(installed, broken), notify=notices)
        if active is not None:
            state.apply(active)
            state.backend.calls.clear()
        return state

    return _make
