"""
PRISM — Theme Selector
Live-preview selection over a catalog: every highlighted candidate is applied
as it is reached, cancelling restores the theme that was active before, and
confirming keeps the chosen one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol

from .availability import filter_loadable
from .catalog import CATALOGS, Catalog
from .errors import NoCandidates, PrismError, SessionActive
from .state import ActiveThemeState

logger = logging.getLogger(__name__)


class SelectorState(str, Enum):
    IDLE = "idle"
    BROWSING = "browsing"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class ChoiceRequest:
    prompt: str
    candidates: list[str]
    default: str
    require_match: bool = True


class Chooser(Protocol):
    """Interactive list selection.

    `on_highlight` is called with the highlighted candidate (or None when the
    filtered list is empty) every time the highlight moves. `on_done` is called
    once with the confirmed candidate, or None on cancel.
    """

    def choose(
        self,
        request: ChoiceRequest,
        on_highlight: Callable[[Optional[str]], None],
        on_done: Callable[[Optional[str]], None],
    ) -> None: ...


@dataclass
class Session:
    prompt: str
    original: Optional[str]
    candidates: list[str] = field(default_factory=list)
    last_previewed: Optional[str] = None
    state: SelectorState = SelectorState.BROWSING


class ThemeSelector:
    """Drives one selection session at a time against an ActiveThemeState."""

    def __init__(
        self,
        themes: ActiveThemeState,
        chooser: Chooser,
        on_commit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.themes = themes
        self.chooser = chooser
        self.on_commit = on_commit
        self._session: Optional[Session] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def state(self) -> SelectorState:
        return self._session.state if self._session else SelectorState.IDLE

    # ── Entry points ─────────────────────────────────────────

    def select_dark_theme(self) -> Optional[Session]:
        return self.run_catalog(CATALOGS["dark"])

    def select_light_theme(self) -> Optional[Session]:
        return self.run_catalog(CATALOGS["light"])

    def select_other_theme(self) -> Optional[Session]:
        return self.run_catalog(CATALOGS["other"])

    def run_catalog(self, catalog: Catalog) -> Optional[Session]:
        return self.run_selector(catalog.themes, catalog.prompt, label=catalog.label)

    def run_selector(self, catalog: Sequence[str], prompt: str, label: str = "matching") -> Optional[Session]:
        """Open a session over `catalog` and hand it to the chooser.

        Returns the session (already finished if the chooser is synchronous),
        or None when no session could be started.
        """
        try:
            session = self.begin(catalog, prompt, label=label)
        except PrismError as exc:
            logger.info("Selection not started: %s", exc)
            self.themes.notify(str(exc), "warning")
            return None

        default = session.original if session.original in session.candidates else session.candidates[0]
        request = ChoiceRequest(prompt=prompt, candidates=list(session.candidates), default=default)
        self.chooser.choose(request, self.highlight, self.finish)
        return session

    # ── Transitions ──────────────────────────────────────────

    def begin(self, catalog: Sequence[str], prompt: str, label: str = "matching") -> Session:
        if self._session is not None:
            raise SessionActive(self._session.prompt)
        candidates = filter_loadable(catalog, self.themes.is_loadable)
        if not candidates:
            raise NoCandidates(label)
        self._session = Session(prompt=prompt, original=self.themes.current, candidates=candidates)
        logger.debug("Session started with %d candidates, original=%s", len(candidates), self._session.original)
        return self._session

    def highlight(self, candidate: Optional[str]) -> None:
        session = self._session
        if session is None or candidate is None:
            return
        if candidate == self.themes.current:
            return
        result = self.themes.apply(candidate)
        if result.ok:
            session.last_previewed = candidate

    def finish(self, choice: Optional[str]) -> None:
        session = self._session
        if session is None:
            return
        try:
            if choice is None or choice not in session.candidates:
                self._abort(session)
            else:
                self._commit(session, choice)
        finally:
            self._session = None

    def _commit(self, session: Session, choice: str) -> None:
        session.state = SelectorState.COMMITTED
        if choice != self.themes.current and not self.themes.apply(choice).ok:
            return
        logger.info("Committed theme %s", choice)
        if self.on_commit is not None:
            self.on_commit(choice)

    def _abort(self, session: Session) -> None:
        session.state = SelectorState.ABORTED
        if self.themes.current == session.original:
            return
        self.themes.deactivate_all()
        if session.original is not None:
            self.themes.apply(session.original)
        logger.info("Selection aborted, restored %s", session.original or "no theme")
